# blobsync Storage URLs
# SAS token handling and container/blob URL parsing

from dataclasses import dataclass
from urllib.parse import quote, unquote, urlsplit

from blobsync.errors import InvalidOperationError


@dataclass(frozen=True)
class BlobLocation:
    """
    A parsed storage URL.

    ``prefix`` is empty for a container URL and holds the blob path
    (or name prefix) otherwise.
    """

    account_url: str
    container: str
    prefix: str = ""

    @property
    def container_url(self) -> str:
        """URL of the container, without token."""
        return f"{self.account_url}/{self.container}"

    @property
    def is_container(self) -> bool:
        """Check if the URL addresses a whole container."""
        return not self.prefix

    def blob_url(self, name: str) -> str:
        """Fetch address for a blob in this container, without token."""
        return f"{self.container_url}/{quote(name, safe='/')}"


def normalize_token(token: str) -> str:
    """
    Strip a single leading ``?`` from a SAS token.

    Args:
        token: SAS token as copied from the portal or CLI.

    Returns:
        Token suitable for appending after ``?``.
    """
    token = token.strip()
    if token.startswith("?"):
        return token[1:]
    return token


def with_token(url: str, token: str) -> str:
    """Append the SAS token to a URL as its query string."""
    token = normalize_token(token)
    if not token:
        return url
    return f"{url}?{token}"


def redact_token(text: str, token: str) -> str:
    """Replace every occurrence of the token in ``text``."""
    token = normalize_token(token)
    if not token:
        return text
    return text.replace(token, "***")


def parse_blob_url(url: str) -> BlobLocation:
    """
    Parse a container or blob URL.

    Args:
        url: ``https://<account>.blob.core.windows.net/<container>[/<blob path>]``.
             Any query string or fragment is ignored.

    Returns:
        BlobLocation for the URL.

    Raises:
        InvalidOperationError: If the URL has no scheme, host or container.
    """
    parts = urlsplit(url.strip())
    if not parts.scheme or not parts.netloc:
        raise InvalidOperationError(f"Not an absolute storage URL: {url}")

    path = parts.path.lstrip("/")
    container, _, prefix = path.partition("/")
    if not container:
        raise InvalidOperationError(f"URL does not name a container: {url}")

    return BlobLocation(
        account_url=f"{parts.scheme}://{parts.netloc}",
        container=unquote(container),
        prefix=unquote(prefix),
    )
