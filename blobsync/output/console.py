# blobsync Console Output
# Rich-based console output for sync results and status messages

import json
from typing import Optional

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from blobsync.config.schema import BlobsyncConfig
from blobsync.sync.actions import SyncDecision
from blobsync.sync.engine import SyncResult
from blobsync.sync.items import Operation, RemoteBlob, ResultRow

OPERATION_STYLES = {
    Operation.DOWNLOADED: "green",
    Operation.OVERWRITTEN: "yellow",
    Operation.SKIPPED: "dim",
    Operation.ERROR: "red",
}


class Console:
    """
    Console output manager using Rich.

    Results (tables, JSON) go to stdout; status messages go to stderr so
    stdout stays machine-readable.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
        """
        self.verbose = verbose
        self._console = RichConsole(no_color=not colored, highlight=False)
        self._err_console = RichConsole(stderr=True, no_color=not colored, highlight=False)

    def print(self, *args, **kwargs) -> None:
        """Print to stdout."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._err_console.print(f"[red]Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._err_console.print(f"[green]{escape(message)}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._err_console.print(f"[blue]{escape(message)}[/blue]")

    def print_decision(self, decision: SyncDecision, *, dry_run: bool = False) -> None:
        """Print a progress line for a blob (verbose only)."""
        if not self.verbose:
            return

        name = escape(decision.blob.name)
        if not decision.should_transfer:
            self._err_console.print(f"  [dim]○ Skipping {name} (same size)[/dim]")
        elif dry_run:
            self._err_console.print(f"  [cyan]↓[/cyan] Would transfer {name}")
        else:
            self._err_console.print(f"  [cyan]↓[/cyan] Downloading {name}")

    def print_rows(self, rows: list[ResultRow], *, title: Optional[str] = None) -> None:
        """
        Print result rows as a table.

        Args:
            rows: Rows in listing order.
            title: Optional table title.
        """
        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("Name", style="cyan")
        table.add_column("Size (KB)", justify="right")
        table.add_column("Url", style="dim", overflow="fold")
        table.add_column("Path", overflow="fold")
        table.add_column("Operation")

        for row in rows:
            style = OPERATION_STYLES.get(row.operation, "white")
            table.add_row(
                escape(row.name),
                row.size_text,
                escape(row.url),
                escape(row.path),
                f"[{style}]{escape(row.operation_text)}[/{style}]",
            )

        self._console.print(table)

    def print_rows_json(self, rows: list[ResultRow]) -> None:
        """Print result rows as a JSON array."""
        self._console.out(json.dumps([row.to_dict() for row in rows], indent=2), highlight=False)

    def print_sync_result(self, result: SyncResult, *, as_json: bool = False) -> None:
        """
        Print sync rows followed by a summary.

        Args:
            result: Sync result to display.
            as_json: Print rows as JSON and skip the summary panel.
        """
        if as_json:
            self.print_rows_json(result.rows)
            return

        if not result.rows:
            self.print_info("No blobs found")
            return

        title = "Planned Transfers (dry-run)" if result.dry_run else None
        self.print_rows(result.rows, title=title)

        status_text = "Dry run completed" if result.dry_run else "Sync completed"
        if not result.success:
            status_text += " with errors"

        self._err_console.print(
            Panel(
                f"{status_text}\n"
                f"Destination: {escape(str(result.destination))}\n"
                f"Blobs: {result.total} total, {result.downloaded} downloaded, "
                f"{result.overwritten} overwritten, {result.skipped} skipped, {result.errors} errors",
                title="Summary",
                border_style="green" if result.success else "yellow",
            )
        )

    def print_blobs(self, blobs: list[RemoteBlob], *, as_json: bool = False) -> None:
        """Print a remote listing."""
        if as_json:
            data = [{"Name": blob.name, "SizeKB": f"{blob.size_kb:.2f}", "Url": blob.url} for blob in blobs]
            self._console.out(json.dumps(data, indent=2), highlight=False)
            return

        if not blobs:
            self.print_info("No blobs found")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Name", style="cyan")
        table.add_column("Size (KB)", justify="right")
        table.add_column("Url", style="dim", overflow="fold")

        for blob in blobs:
            table.add_row(escape(blob.name), f"{blob.size_kb:.2f}", escape(blob.url))

        self._console.print(table)

    def print_config(self, config: BlobsyncConfig, config_path: str) -> None:
        """Print effective configuration."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Setting", style="cyan")
        table.add_column("Value")

        for section, values in config.model_dump(mode="json").items():
            for key, value in values.items():
                table.add_row(f"{section}.{key}", "" if value is None else str(value))

        self._console.print(Panel(f"Config: {config_path}", title="blobsync Configuration", border_style="blue"))
        self._console.print(table)


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)
