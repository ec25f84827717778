# blobsync Test Fixtures
# Pytest fixtures for blobsync tests

import tempfile
from collections.abc import Generator
from decimal import Decimal
from pathlib import Path
from typing import Optional

import pytest
import yaml

from blobsync.errors import RemoteError
from blobsync.sync.items import RemoteBlob, TransferResult

CONTAINER_URL = "https://acct.blob.core.windows.net/data"


def make_blob(name: str, size_kb: str) -> RemoteBlob:
    """Create a RemoteBlob in the test container."""
    return RemoteBlob(name=name, size_kb=Decimal(size_kb), url=f"{CONTAINER_URL}/{name}")


class FakeStore:
    """In-memory stand-in for BlobStore that records every call."""

    def __init__(self, blobs: Optional[list[RemoteBlob]] = None, content: bytes = b""):
        self.blobs = list(blobs or [])
        self.content = content
        self.listing_error: Optional[str] = None
        self.failures: dict[str, str] = {}
        self.list_calls: list[tuple[str, str]] = []
        self.read_calls: list[str] = []
        self.transfer_calls: list[tuple[str, Path]] = []

    def list_blobs(self, url: str, token: str) -> list[RemoteBlob]:
        self.list_calls.append((url, token))
        if self.listing_error is not None:
            raise RemoteError(self.listing_error)
        return list(self.blobs)

    def read_blob(self, source_url: str) -> bytes:
        self.read_calls.append(source_url)
        return self.content

    def transfer(self, source_url: str, destination: Path) -> TransferResult:
        self.transfer_calls.append((source_url, destination))
        if destination.name in self.failures:
            return TransferResult.failed(self.failures[destination.name])
        return TransferResult.succeeded()

    @property
    def transferred_names(self) -> list[str]:
        return [destination.name for _, destination in self.transfer_calls]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("BLOBSYNC_CONFIG", raising=False)
    monkeypatch.delenv("BLOBSYNC_SAS_TOKEN", raising=False)
    return home


@pytest.fixture
def fake_store() -> FakeStore:
    """Store with blobs A (10.00 KB) and B (20.00 KB)."""
    return FakeStore(blobs=[make_blob("A", "10.00"), make_blob("B", "20.00")])


@pytest.fixture
def destination(temp_dir: Path) -> Path:
    """Destination directory holding A with 10.00 KB."""
    dest = temp_dir / "dest"
    dest.mkdir()
    (dest / "A").write_bytes(b"x" * 10240)
    return dest


@pytest.fixture
def sample_config() -> dict:
    """Create sample configuration dict."""
    return {
        "output": {"verbose": True, "colored": False, "format": "json"},
        "transfer": {"max_concurrency": 4, "timeout": 30},
        "defaults": {"path": "~/downloads"},
    }


@pytest.fixture
def config_file(temp_home: Path, sample_config: dict) -> Path:
    """Create a configuration file."""
    config_dir = temp_home / ".config" / "blobsync"
    config_dir.mkdir(parents=True)
    config_path = config_dir / "config.yaml"

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(sample_config, f, default_flow_style=False)

    return config_path
