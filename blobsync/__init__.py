"""blobsync - Azure Blob Storage to local directory synchronization.

Downloads the blobs of a container (or a single blob) into a local
directory, skipping files that are already present with the same size,
or streams a single blob's raw content.
"""

__version__ = "1.0.0"
__author__ = "Equitania Software GmbH"
__email__ = "info@equitania.de"

__all__ = [
    "__version__",
    "BlobSyncEngine",
    "SyncResult",
    "RemoteBlob",
    "LocalFile",
    "ResultRow",
    "Operation",
    "BlobStore",
    "TransferResult",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name in ("BlobSyncEngine", "SyncResult"):
        from blobsync.sync import engine

        return getattr(engine, name)
    if name in ("RemoteBlob", "LocalFile", "ResultRow", "Operation"):
        from blobsync.sync import items

        return getattr(items, name)
    if name in ("BlobStore", "TransferResult"):
        from blobsync.storage import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
