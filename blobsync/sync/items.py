# blobsync Sync Items
# Remote blobs, local files, transfer results and result rows

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from enum import Enum
from typing import Optional

_KB = Decimal(1024)
_TWO_PLACES = Decimal("0.01")


def size_kb(num_bytes: int) -> Decimal:
    """
    Convert a byte count to kilobytes rounded to 2 decimal places.

    Both sides of a comparison go through this function, so equal
    rounded sizes compare equal regardless of the underlying byte count.
    """
    return (Decimal(num_bytes) / _KB).quantize(_TWO_PLACES, rounding=ROUND_HALF_EVEN)


class Operation(str, Enum):
    """Outcome recorded for a remote blob."""

    DOWNLOADED = "Downloaded"
    SKIPPED = "Skipped"
    OVERWRITTEN = "Overwritten"
    ERROR = "Error"


@dataclass(frozen=True)
class RemoteBlob:
    """A blob returned by the listing collaborator."""

    name: str
    size_kb: Decimal
    url: str


@dataclass(frozen=True)
class LocalFile:
    """A file in the destination directory."""

    name: str
    size_kb: Decimal


@dataclass(frozen=True)
class TransferResult:
    """Result of a single transfer call."""

    success: bool
    error: Optional[str] = None

    @classmethod
    def succeeded(cls) -> "TransferResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> "TransferResult":
        return cls(success=False, error=error)


@dataclass
class ResultRow:
    """
    Per-blob result of a sync run.

    ``error`` is set only when ``operation`` is ``Operation.ERROR``.
    """

    name: str
    size_kb: Decimal
    url: str
    path: str
    operation: Operation
    error: Optional[str] = None

    @property
    def size_text(self) -> str:
        """Size in KB formatted to 2 decimals."""
        return f"{self.size_kb:.2f}"

    @property
    def operation_text(self) -> str:
        """Operation as displayed, ``Error: <message>`` for failures."""
        if self.operation == Operation.ERROR:
            return f"Error: {self.error}"
        return self.operation.value

    @property
    def failed(self) -> bool:
        return self.operation == Operation.ERROR

    def to_dict(self) -> dict[str, str]:
        """Serializable form with the column names of the result table."""
        return {
            "Name": self.name,
            "SizeKB": self.size_text,
            "Url": self.url,
            "Path": self.path,
            "Operation": self.operation_text,
        }
