# blobsync Sync Actions
# Per-blob decision and outcome recording

from collections.abc import Collection
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from blobsync.sync.items import LocalFile, Operation, RemoteBlob, ResultRow, TransferResult


@dataclass(frozen=True)
class SyncDecision:
    """
    What to do with a remote blob, decided before any transfer.

    A local file counts as present only when both the name and the
    rounded size in KB match.
    """

    blob: RemoteBlob
    present_same_size: bool
    force: bool = False

    @property
    def should_overwrite(self) -> bool:
        """Check if a matching local file will be replaced."""
        return self.force and self.present_same_size

    @property
    def should_transfer(self) -> bool:
        """Check if the blob must be transferred.

        Force transfers every blob, not only those already present.
        """
        return not self.present_same_size or self.force

    @property
    def planned_operation(self) -> Operation:
        """Operation recorded if the transfer (when any) succeeds."""
        if self.should_overwrite:
            return Operation.OVERWRITTEN
        if self.present_same_size:
            return Operation.SKIPPED
        return Operation.DOWNLOADED


def is_present_same_size(blob: RemoteBlob, local_files: Collection[LocalFile]) -> bool:
    """Check for a local file with the blob's name and rounded size."""
    return LocalFile(name=blob.name, size_kb=blob.size_kb) in local_files


def determine_action(blob: RemoteBlob, local_files: Collection[LocalFile], *, force: bool = False) -> SyncDecision:
    """
    Decide what to do with a remote blob.

    Args:
        blob: The remote blob.
        local_files: Files currently in the destination directory.
        force: Transfer even when a same-size local file exists.

    Returns:
        SyncDecision for the blob.
    """
    return SyncDecision(blob=blob, present_same_size=is_present_same_size(blob, local_files), force=force)


def record_outcome(
    decision: SyncDecision,
    transfer_result: Optional[TransferResult],
    destination: Path,
) -> ResultRow:
    """
    Build the result row for a blob.

    Args:
        decision: Decision made for the blob.
        transfer_result: Result of this blob's transfer, None if no
                         transfer was made.
        destination: Destination directory.

    Returns:
        ResultRow; a failed transfer takes precedence over every other outcome.
    """
    blob = decision.blob
    operation = decision.planned_operation
    error = None

    if transfer_result is not None and not transfer_result.success:
        operation = Operation.ERROR
        error = transfer_result.error or "Transfer failed"

    return ResultRow(
        name=blob.name,
        size_kb=blob.size_kb,
        url=blob.url,
        path=str(destination),
        operation=operation,
        error=error,
    )
