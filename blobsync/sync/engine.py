# blobsync Sync Engine
# Compares remote blobs with the destination directory and transfers what is missing

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from blobsync.errors import InvalidOperationError, NotFoundError, SyncAbortedError
from blobsync.storage.urls import normalize_token, redact_token, with_token
from blobsync.sync.actions import SyncDecision, determine_action, record_outcome
from blobsync.sync.items import LocalFile, Operation, RemoteBlob, ResultRow, TransferResult
from blobsync.sync.local import scan_local_files
from blobsync.utils.paths import ensure_destination, is_within

if TYPE_CHECKING:
    from blobsync.storage.client import BlobStore

TransferFunc = Callable[[str, Path], TransferResult]


@dataclass
class SyncResult:
    """Result of a sync run, one row per remote blob in listing order."""

    destination: Path
    rows: list[ResultRow] = field(default_factory=list)
    dry_run: bool = False

    def count(self, operation: Operation) -> int:
        return sum(1 for row in self.rows if row.operation == operation)

    @property
    def total(self) -> int:
        return len(self.rows)

    @property
    def downloaded(self) -> int:
        return self.count(Operation.DOWNLOADED)

    @property
    def overwritten(self) -> int:
        return self.count(Operation.OVERWRITTEN)

    @property
    def skipped(self) -> int:
        return self.count(Operation.SKIPPED)

    @property
    def errors(self) -> int:
        return self.count(Operation.ERROR)

    @property
    def success(self) -> bool:
        """Check if no blob failed to transfer."""
        return self.errors == 0


class BlobSyncEngine:
    """
    Blob sync decision engine.

    Processes blobs strictly one after another: decide, transfer if
    needed, record the outcome. A failed transfer is recorded on its
    row and processing continues; anything else aborts the batch.
    """

    def __init__(
        self,
        store: "BlobStore",
        sas_token: str,
        *,
        transfer: Optional[TransferFunc] = None,
        on_decision: Optional[Callable[[SyncDecision], None]] = None,
    ):
        """
        Initialize sync engine.

        Args:
            store: Listing/fetch/transfer collaborator.
            sas_token: SAS token, with or without a leading "?".
            transfer: Transfer callable overriding ``store.transfer``.
            on_decision: Optional callback invoked before each blob is handled.
        """
        self.store = store
        self.token = normalize_token(sas_token)
        self.transfer = transfer or store.transfer
        self.on_decision = on_decision

    def list_remote(self, url: str) -> list[RemoteBlob]:
        """List the blobs the URL resolves to."""
        return self.store.list_blobs(url, self.token)

    def sync(self, url: str, destination: Path, *, force: bool = False, dry_run: bool = False) -> SyncResult:
        """
        Synchronize the blobs at ``url`` into ``destination``.

        Args:
            url: Container or blob URL.
            destination: Local destination directory.
            force: Transfer every blob, overwriting same-size local files.
            dry_run: Decide only; no directory creation, no transfers.

        Returns:
            SyncResult with one row per blob.

        Raises:
            RemoteError: If listing fails.
            SyncAbortedError: If a blob fails with anything other than a
                              reported transfer failure.
        """
        blobs = self.list_remote(url)

        if not dry_run:
            ensure_destination(destination)

        local_files = scan_local_files(destination)
        rows = self.sync_blobs(blobs, local_files, destination, force=force, dry_run=dry_run)
        return SyncResult(destination=destination, rows=rows, dry_run=dry_run)

    def sync_blobs(
        self,
        blobs: list[RemoteBlob],
        local_files: list[LocalFile],
        destination: Path,
        *,
        force: bool = False,
        dry_run: bool = False,
    ) -> list[ResultRow]:
        """
        Resolve each blob against the local inventory.

        Returns:
            ResultRows in the order of ``blobs``.
        """
        local_index = frozenset(local_files)
        rows: list[ResultRow] = []

        for blob in blobs:
            decision = determine_action(blob, local_index, force=force)
            if self.on_decision is not None:
                self.on_decision(decision)

            transfer_result = None
            if decision.should_transfer and not dry_run:
                target = destination / blob.name
                if is_within(target, destination):
                    source = with_token(blob.url, self.token)
                    try:
                        transfer_result = self.transfer(source, target)
                    except Exception as e:
                        message = redact_token(str(e), self.token)
                        raise SyncAbortedError(f"{blob.name}: {message}", rows=rows) from e
                else:
                    transfer_result = TransferResult.failed("Blob name escapes destination")

            rows.append(record_outcome(decision, transfer_result, destination))

        return rows

    def get_content(self, url: str) -> bytes:
        """
        Fetch the raw content of the single blob at ``url``.

        Raises:
            RemoteError: If listing or fetching fails.
            InvalidOperationError: If the URL resolves to more than one blob.
            NotFoundError: If the URL resolves to no blob.
        """
        blobs = self.list_remote(url)

        if len(blobs) > 1:
            raise InvalidOperationError(f"Cannot fetch content for multiple blobs ({len(blobs)} match {url})")
        if not blobs:
            raise NotFoundError(f"No blob found at {url}")

        return self.store.read_blob(with_token(blobs[0].url, self.token))
