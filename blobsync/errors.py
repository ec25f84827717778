# blobsync Errors
# Exception hierarchy for fatal (whole-operation) failures

from typing import Optional


class BlobSyncError(Exception):
    """Base class for errors that terminate a blobsync operation."""


class RemoteError(BlobSyncError):
    """Listing or content retrieval failed on the storage service."""


class InvalidOperationError(BlobSyncError):
    """The request cannot be carried out as given."""


class NotFoundError(BlobSyncError):
    """The URL did not resolve to any blob."""


class SyncAbortedError(BlobSyncError):
    """
    A batch was aborted part-way through.

    Carries the result rows computed before the failure so callers can
    still report them.
    """

    def __init__(self, message: str, rows: Optional[list] = None):
        super().__init__(message)
        self.rows = list(rows or [])
