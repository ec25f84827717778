# blobsync Storage Module
# Azure Blob Storage collaborators: listing, content fetch, transfer

from blobsync.storage.client import BlobStore, TransferResult
from blobsync.storage.urls import BlobLocation, normalize_token, parse_blob_url, redact_token, with_token

__all__ = [
    # URLs
    "BlobLocation",
    "normalize_token",
    "parse_blob_url",
    "redact_token",
    "with_token",
    # Client
    "BlobStore",
    "TransferResult",
]
