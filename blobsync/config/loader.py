# blobsync Configuration Loader
# Load, save, and validate YAML configuration files

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from blobsync.config.defaults import generate_default_config, get_default_config
from blobsync.config.schema import BlobsyncConfig


def get_config_dir() -> Path:
    """Get the blobsync configuration directory."""
    return Path.home() / ".config" / "blobsync"


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    # Allow override via environment variable
    env_path = os.environ.get("BLOBSYNC_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> BlobsyncConfig:
    """
    Load configuration from YAML file.

    A missing file yields the default configuration.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        BlobsyncConfig: Validated configuration object.

    Raises:
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the top level is not a mapping.
        ValidationError: If config file is invalid.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return BlobsyncConfig.model_validate(get_default_config())

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a mapping: {config_path}")

    return BlobsyncConfig.model_validate(_merge_with_defaults(data))


def ensure_config_exists(config_path: Optional[Path] = None) -> tuple[Path, bool]:
    """
    Ensure configuration file exists, creating default if needed.

    Returns:
        Tuple of (config_path, was_created).
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        return config_path, False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_default_config(), encoding="utf-8")
    return config_path, True


def validate_config_file(config_path: Optional[Path] = None) -> tuple[bool, list[str]]:
    """
    Validate a configuration file.

    Args:
        config_path: Path to config file to validate.

    Returns:
        Tuple of (is_valid, error_messages).
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return False, [f"Configuration file not found: {config_path}"]

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return False, [f"Invalid YAML syntax: {e}"]

    if data is None:
        return False, ["Configuration file is empty"]

    if not isinstance(data, dict):
        return False, ["Configuration must be a mapping"]

    try:
        BlobsyncConfig.model_validate(_merge_with_defaults(data))
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")
        return False, errors

    return True, []


def _merge_with_defaults(data: dict) -> dict:
    """Merge loaded data with default values for missing keys."""
    result = get_default_config()

    for section, values in data.items():
        if isinstance(values, dict) and isinstance(result.get(section), dict):
            result[section] = {**result[section], **values}
        else:
            result[section] = values

    return result
