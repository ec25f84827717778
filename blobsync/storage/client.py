# blobsync Storage Client
# Listing, raw fetch and file transfer over the Azure Blob SDK

import os
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlsplit

from azure.core.exceptions import AzureError
from azure.storage.blob import BlobClient, ContainerClient

from blobsync.errors import RemoteError
from blobsync.storage.urls import parse_blob_url, redact_token, with_token
from blobsync.sync.items import RemoteBlob, TransferResult, size_kb
from blobsync.utils.paths import temp_path_for


def _error_message(error: Exception) -> str:
    """First line of an SDK error, which carries the service's error text."""
    message = str(getattr(error, "message", None) or error).strip()
    return message.splitlines()[0] if message else type(error).__name__


class BlobStore:
    """
    Azure Blob Storage collaborators used by the sync engine.

    Every request is authorized by the SAS token carried in the URL's
    query string; no account key or identity is involved.
    """

    def __init__(self, *, max_concurrency: int = 1, timeout: Optional[int] = None):
        """
        Initialize store.

        Args:
            max_concurrency: Parallel range requests within one blob download.
            timeout: Per-call server timeout in seconds (None = SDK default).
        """
        self.max_concurrency = max_concurrency
        self.timeout = timeout

    def _request_options(self) -> dict[str, Any]:
        if self.timeout is None:
            return {}
        return {"timeout": self.timeout}

    def list_blobs(self, url: str, token: str) -> list[RemoteBlob]:
        """
        List the blobs a container or blob URL resolves to.

        Args:
            url: Container URL, or blob URL used as a name prefix.
            token: SAS token.

        Returns:
            RemoteBlobs in service listing order.

        Raises:
            RemoteError: If the service rejects or cannot serve the listing.
        """
        location = parse_blob_url(url)
        try:
            container = ContainerClient.from_container_url(with_token(location.container_url, token))
            properties = container.list_blobs(
                name_starts_with=location.prefix or None,
                **self._request_options(),
            )
            return [
                RemoteBlob(name=prop.name, size_kb=size_kb(prop.size or 0), url=location.blob_url(prop.name))
                for prop in properties
            ]
        except (AzureError, ValueError) as e:
            raise RemoteError(redact_token(_error_message(e), token)) from e

    def read_blob(self, source_url: str) -> bytes:
        """
        Fetch the raw content of a blob.

        Args:
            source_url: Blob URL including the SAS token query.

        Raises:
            RemoteError: If the download fails.
        """
        token = urlsplit(source_url).query
        try:
            blob = BlobClient.from_blob_url(source_url)
            downloader = blob.download_blob(max_concurrency=self.max_concurrency, **self._request_options())
            return downloader.readall()
        except (AzureError, ValueError) as e:
            raise RemoteError(redact_token(_error_message(e), token)) from e

    def transfer(self, source_url: str, destination: Path) -> TransferResult:
        """
        Download a blob to a local file.

        The content is written to a temporary sibling and renamed into
        place, so ``destination`` is either the old file or the complete
        new one.

        Args:
            source_url: Blob URL including the SAS token query.
            destination: Target file path.

        Returns:
            TransferResult; storage and filesystem failures are reported
            here rather than raised.
        """
        token = urlsplit(source_url).query
        temp_path = temp_path_for(destination)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            blob = BlobClient.from_blob_url(source_url)
            with open(temp_path, "wb") as f:
                downloader = blob.download_blob(max_concurrency=self.max_concurrency, **self._request_options())
                downloader.readinto(f)
            os.replace(temp_path, destination)
        except (AzureError, OSError, ValueError) as e:
            _discard(temp_path)
            return TransferResult.failed(redact_token(_error_message(e), token))

        return TransferResult.succeeded()


def _discard(path: Path) -> None:
    """Remove a leftover temporary file, if any."""
    try:
        path.unlink(missing_ok=True)
    except OSError:
        pass
