# blobsync Path Utilities
# Destination directory handling and temporary download paths

import os
from pathlib import Path


def ensure_destination(path: Path) -> Path:
    """
    Ensure the destination directory exists.

    An existing entry under that name is accepted as-is, even when it is
    not a directory; any other creation failure propagates.

    Args:
        path: Directory path.

    Returns:
        The path that was ensured.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except FileExistsError:
        pass
    return path


def temp_path_for(dest: Path) -> Path:
    """Temporary sibling of ``dest`` used for atomic rename."""
    return dest.with_name(f".{dest.name}.tmp.{os.getpid()}")


def is_within(path: Path, base: Path) -> bool:
    """Check that ``path`` resolves to a location under ``base``."""
    return path.resolve().is_relative_to(base.resolve())
