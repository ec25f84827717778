# blobsync Sync Module
# Decision engine and its data model

from blobsync.sync.actions import SyncDecision, determine_action, is_present_same_size, record_outcome
from blobsync.sync.engine import BlobSyncEngine, SyncResult
from blobsync.sync.items import LocalFile, Operation, RemoteBlob, ResultRow, TransferResult, size_kb
from blobsync.sync.local import scan_local_files

__all__ = [
    # Items
    "RemoteBlob",
    "LocalFile",
    "ResultRow",
    "Operation",
    "TransferResult",
    "size_kb",
    # Local inventory
    "scan_local_files",
    # Actions
    "SyncDecision",
    "determine_action",
    "is_present_same_size",
    "record_outcome",
    # Engine
    "BlobSyncEngine",
    "SyncResult",
]
