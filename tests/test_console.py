# Tests for blobsync.output.console
# Rich-based console output

import json
from decimal import Decimal
from io import StringIO
from pathlib import Path

from rich.console import Console as RichConsole

from blobsync.config.schema import BlobsyncConfig
from blobsync.output.console import Console, create_console
from blobsync.sync.actions import determine_action
from blobsync.sync.engine import SyncResult
from blobsync.sync.items import Operation, ResultRow

from conftest import make_blob


def _make_console(verbose: bool = False) -> Console:
    """Create a console with captured stdout and stderr."""
    console = Console(verbose=verbose, colored=False)
    console._console = RichConsole(file=StringIO(), no_color=True, width=200)
    console._err_console = RichConsole(file=StringIO(), no_color=True, width=200)
    return console


def _get_output(console: Console) -> str:
    """Get captured stdout."""
    console._console.file.seek(0)
    return console._console.file.read()


def _get_errors(console: Console) -> str:
    """Get captured stderr."""
    console._err_console.file.seek(0)
    return console._err_console.file.read()


def _rows() -> list[ResultRow]:
    return [
        ResultRow("a.txt", Decimal("10.00"), "https://acct/data/a.txt", "/tmp/dest", Operation.SKIPPED),
        ResultRow("b.txt", Decimal("20.5"), "https://acct/data/b.txt", "/tmp/dest", Operation.DOWNLOADED),
        ResultRow(
            "c.txt",
            Decimal("1.00"),
            "https://acct/data/c.txt",
            "/tmp/dest",
            Operation.ERROR,
            error="The specified blob does not exist.",
        ),
    ]


class TestConsoleBasic:
    """Tests for basic console methods."""

    def test_print(self):
        c = _make_console()
        c.print("hello world")
        assert "hello world" in _get_output(c)

    def test_print_error_goes_to_stderr(self):
        c = _make_console()
        c.print_error("something failed")
        assert "Error: something failed" in _get_errors(c)
        assert _get_output(c) == ""

    def test_print_error_with_brackets(self):
        c = _make_console()
        c.print_error("bad value [x]")
        assert "bad value [x]" in _get_errors(c)

    def test_print_success_and_info_with_brackets(self):
        c = _make_console()
        c.print_success("Wrote 4 bytes to /tmp/a[/x].csv")
        c.print_info("[bold] literal")
        errors = _get_errors(c)
        assert "/tmp/a[/x].csv" in errors
        assert "[bold] literal" in errors

    def test_print_warning(self):
        c = _make_console()
        c.print_warning("be careful")
        assert "Warning: be careful" in _get_errors(c)

    def test_print_success(self):
        c = _make_console()
        c.print_success("all good")
        assert "all good" in _get_errors(c)

    def test_print_info(self):
        c = _make_console()
        c.print_info("fyi")
        assert "fyi" in _get_errors(c)

    def test_create_console(self):
        c = create_console(verbose=True, colored=False)
        assert c.verbose is True


class TestConsoleDecisions:
    """Tests for verbose progress lines."""

    def test_quiet_by_default(self):
        c = _make_console()
        c.print_decision(determine_action(make_blob("a.txt", "1.00"), []))
        assert _get_errors(c) == ""

    def test_verbose_download(self):
        c = _make_console(verbose=True)
        c.print_decision(determine_action(make_blob("a.txt", "1.00"), []))
        assert "Downloading a.txt" in _get_errors(c)

    def test_verbose_dry_run(self):
        c = _make_console(verbose=True)
        c.print_decision(determine_action(make_blob("a.txt", "1.00"), []), dry_run=True)
        assert "Would transfer a.txt" in _get_errors(c)


class TestConsoleResults:
    """Tests for result rendering."""

    def test_rows_table(self):
        c = _make_console()
        c.print_rows(_rows())
        output = _get_output(c)

        for name in ("a.txt", "b.txt", "c.txt"):
            assert name in output
        assert "20.50" in output
        assert "Skipped" in output
        assert "Downloaded" in output
        assert "Error: The specified blob does not exist." in output
        assert output.index("a.txt") < output.index("b.txt") < output.index("c.txt")

    def test_rows_json(self):
        c = _make_console()
        c.print_rows_json(_rows())
        data = json.loads(_get_output(c))

        assert [row["Name"] for row in data] == ["a.txt", "b.txt", "c.txt"]
        assert data[1]["SizeKB"] == "20.50"
        assert data[2]["Operation"] == "Error: The specified blob does not exist."

    def test_sync_result_summary(self, temp_dir: Path):
        c = _make_console()
        c.print_sync_result(SyncResult(destination=temp_dir, rows=_rows()))

        errors = _get_errors(c)
        assert "Sync completed with errors" in errors
        assert "3 total, 1 downloaded, 0 overwritten, 1 skipped, 1 errors" in errors

    def test_dry_run_title(self, temp_dir: Path):
        c = _make_console()
        c.print_sync_result(SyncResult(destination=temp_dir, rows=_rows()[:2], dry_run=True))

        assert "dry-run" in _get_output(c)
        assert "Dry run completed" in _get_errors(c)

    def test_sync_result_json_has_no_summary(self, temp_dir: Path):
        c = _make_console()
        c.print_sync_result(SyncResult(destination=temp_dir, rows=_rows()), as_json=True)

        assert len(json.loads(_get_output(c))) == 3
        assert _get_errors(c) == ""

    def test_empty_result(self, temp_dir: Path):
        c = _make_console()
        c.print_sync_result(SyncResult(destination=temp_dir))
        assert "No blobs found" in _get_errors(c)


class TestConsoleListing:
    """Tests for remote listings and config display."""

    def test_blobs_table(self):
        c = _make_console()
        c.print_blobs([make_blob("a.txt", "1.50")])
        output = _get_output(c)
        assert "a.txt" in output
        assert "1.50" in output

    def test_blobs_json(self):
        c = _make_console()
        c.print_blobs([make_blob("a.txt", "1.5")], as_json=True)
        assert json.loads(_get_output(c)) == [
            {"Name": "a.txt", "SizeKB": "1.50", "Url": "https://acct.blob.core.windows.net/data/a.txt"}
        ]

    def test_config(self):
        c = _make_console()
        c.print_config(BlobsyncConfig(), "/tmp/config.yaml")
        output = _get_output(c)
        assert "/tmp/config.yaml" in output
        assert "transfer.max_concurrency" in output
        assert "output.format" in output
