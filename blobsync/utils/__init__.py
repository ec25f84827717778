# blobsync Utilities Module
# Helper functions for path handling

from blobsync.utils.paths import ensure_destination, is_within, temp_path_for

__all__ = [
    "ensure_destination",
    "is_within",
    "temp_path_for",
]
