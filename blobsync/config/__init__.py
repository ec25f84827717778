# blobsync Configuration Module
# Handles YAML-based configuration loading, validation, and defaults

from blobsync.config.defaults import DEFAULT_CONFIG, generate_default_config
from blobsync.config.loader import (
    ensure_config_exists,
    get_config_path,
    load_config,
    validate_config_file,
)
from blobsync.config.schema import (
    BlobsyncConfig,
    DefaultsConfig,
    OutputConfig,
    OutputFormat,
    TransferConfig,
)

__all__ = [
    # Schema
    "BlobsyncConfig",
    "OutputConfig",
    "OutputFormat",
    "TransferConfig",
    "DefaultsConfig",
    # Loader
    "load_config",
    "get_config_path",
    "ensure_config_exists",
    "validate_config_file",
    # Defaults
    "DEFAULT_CONFIG",
    "generate_default_config",
]
