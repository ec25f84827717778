"""Click-based CLI for blobsync - Azure Blob Storage to local sync."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import ValidationError

from blobsync import __version__
from blobsync.config import (
    BlobsyncConfig,
    OutputFormat,
    ensure_config_exists,
    get_config_path,
    load_config,
    validate_config_file,
)
from blobsync.errors import BlobSyncError, SyncAbortedError
from blobsync.output.console import Console, create_console
from blobsync.storage.client import BlobStore
from blobsync.sync.engine import BlobSyncEngine

SAS_TOKEN_ENVVAR = "BLOBSYNC_SAS_TOKEN"

sas_token_option = click.option(
    "--sas-token",
    "-t",
    envvar=SAS_TOKEN_ENVVAR,
    required=True,
    help=f"SAS token, with or without leading '?' (env: {SAS_TOKEN_ENVVAR})",
)


def _load_config() -> BlobsyncConfig:
    """Load configuration or exit with a readable error."""
    try:
        return load_config()
    except (OSError, ValueError, yaml.YAMLError, ValidationError) as e:
        create_console().print_error(f"Invalid configuration {get_config_path()}: {e}")
        sys.exit(1)


def _create_store(config: BlobsyncConfig) -> BlobStore:
    return BlobStore(max_concurrency=config.transfer.max_concurrency, timeout=config.transfer.timeout)


def _use_json(as_json: bool, config: BlobsyncConfig) -> bool:
    return as_json or config.output.format == OutputFormat.JSON


@click.group()
@click.version_option(version=__version__, prog_name="blobsync")
def cli() -> None:
    """blobsync - Azure Blob Storage to local directory synchronization.

    Downloads the blobs of a container, or a single blob, into a local
    directory. Files already present with the same name and size are
    skipped unless --force is given.

    \b
    Examples:
        blobsync sync https://acct.blob.core.windows.net/data -t "$SAS" -p ./data
        blobsync content https://acct.blob.core.windows.net/data/report.csv -t "$SAS"
    """
    pass


@cli.command()
@click.argument("url")
@sas_token_option
@click.option("--path", "-p", type=click.Path(file_okay=False, path_type=Path), help="Local destination directory")
@click.option("--force", "-f", is_flag=True, help="Transfer every blob, overwriting same-size local files")
@click.option("--dry-run", "-n", is_flag=True, help="Show what would be transferred without downloading")
@click.option("--json", "as_json", is_flag=True, help="Print result rows as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Print a line per blob while syncing")
def sync(
    url: str,
    sas_token: str,
    path: Optional[Path],
    force: bool,
    dry_run: bool,
    as_json: bool,
    verbose: bool,
) -> None:
    """Synchronize blobs at URL into a local directory.

    URL is a container URL or a blob URL; a blob URL selects every blob
    whose name starts with its path.
    """
    config = _load_config()
    console = create_console(verbose=verbose or config.output.verbose, colored=config.output.colored)
    use_json = _use_json(as_json, config)

    destination = path
    if destination is None and config.defaults.path:
        destination = Path(config.defaults.path)
    if destination is None:
        console.print_error("No destination given. Use --path or set defaults.path in the configuration.")
        sys.exit(1)

    engine = BlobSyncEngine(
        _create_store(config),
        sas_token,
        on_decision=lambda decision: console.print_decision(decision, dry_run=dry_run),
    )

    try:
        result = engine.sync(url, destination, force=force, dry_run=dry_run)
    except SyncAbortedError as e:
        if e.rows:
            if use_json:
                console.print_rows_json(e.rows)
            else:
                console.print_rows(e.rows)
        console.print_error(str(e))
        sys.exit(1)
    except (BlobSyncError, OSError) as e:
        console.print_error(str(e))
        sys.exit(1)

    console.print_sync_result(result, as_json=use_json)

    if not result.success:
        sys.exit(1)


@cli.command()
@click.argument("url")
@sas_token_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write content to FILE instead of stdout",
)
def content(url: str, sas_token: str, output: Optional[Path]) -> None:
    """Print the raw content of the single blob at URL.

    Fails if URL matches more than one blob, or none.
    """
    config = _load_config()
    console = create_console(colored=config.output.colored)
    engine = BlobSyncEngine(_create_store(config), sas_token)

    try:
        data = engine.get_content(url)
    except BlobSyncError as e:
        console.print_error(str(e))
        sys.exit(1)

    if output is not None:
        try:
            output.write_bytes(data)
        except OSError as e:
            console.print_error(str(e))
            sys.exit(1)
        console.print_success(f"Wrote {len(data)} bytes to {output}")
        return

    stdout = click.get_binary_stream("stdout")
    stdout.write(data)
    stdout.flush()


@cli.command("list")
@click.argument("url")
@sas_token_option
@click.option("--json", "as_json", is_flag=True, help="Print blobs as JSON")
def list_blobs(url: str, sas_token: str, as_json: bool) -> None:
    """List the blobs URL resolves to."""
    config = _load_config()
    console = create_console(colored=config.output.colored)
    engine = BlobSyncEngine(_create_store(config), sas_token)

    try:
        blobs = engine.list_remote(url)
    except BlobSyncError as e:
        console.print_error(str(e))
        sys.exit(1)

    console.print_blobs(blobs, as_json=_use_json(as_json, config))


# ============================================================================
# Configuration Commands
# ============================================================================


@cli.group()
def config() -> None:
    """Manage the blobsync configuration file.

    \b
    Location: ~/.config/blobsync/config.yaml
    Override: BLOBSYNC_CONFIG environment variable
    """
    pass


@config.command("init")
def config_init() -> None:
    """Create the configuration file with default values."""
    console = create_console()
    config_path, created = ensure_config_exists()

    if created:
        console.print_success(f"Created configuration: {config_path}")
    else:
        console.print_info(f"Configuration already exists: {config_path}")


@config.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    cfg = _load_config()
    console: Console = create_console(colored=cfg.output.colored)
    console.print_config(cfg, str(get_config_path()))


@config.command("check")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def config_check(file: Path) -> None:
    """Validate a configuration FILE."""
    console = create_console()
    valid, errors = validate_config_file(file)

    if valid:
        console.print_success(f"Configuration is valid: {file}")
        return

    console.print_error(f"Configuration is invalid: {file}")
    for error in errors:
        console.print_warning(error)
    sys.exit(1)


if __name__ == "__main__":
    cli()
