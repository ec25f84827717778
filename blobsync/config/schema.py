# blobsync Configuration Schema
# Pydantic models for YAML configuration validation

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class OutputFormat(str, Enum):
    """How sync results are printed."""

    TABLE = "table"
    JSON = "json"


class OutputConfig(BaseModel):
    """Output settings."""

    verbose: bool = Field(default=False, description="Print a line per blob while syncing")
    colored: bool = Field(default=True, description="Enable colored output")
    format: OutputFormat = Field(default=OutputFormat.TABLE, description="Result format: table or json")


class TransferConfig(BaseModel):
    """Settings passed to the storage SDK for every request."""

    max_concurrency: int = Field(default=1, ge=1, description="Parallel range requests within one blob download")
    timeout: int | None = Field(default=None, gt=0, description="Server timeout per call in seconds")


class DefaultsConfig(BaseModel):
    """Defaults for command options."""

    path: str | None = Field(default=None, description="Destination directory used when --path is not given")

    @field_validator("path")
    @classmethod
    def expand_path(cls, v: str | None) -> str | None:
        """Expand ~ in path."""
        if v is None:
            return None
        return str(Path(v).expanduser())


class BlobsyncConfig(BaseModel):
    """Root configuration model."""

    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")
    transfer: TransferConfig = Field(default_factory=TransferConfig, description="Transfer settings")
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig, description="Option defaults")
