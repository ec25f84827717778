# blobsync Local Inventory
# Enumerate files already present in the destination directory

from pathlib import Path

from blobsync.sync.items import LocalFile, size_kb


def scan_local_files(path: Path) -> list[LocalFile]:
    """
    List the files directly inside ``path``.

    Subdirectories are not descended into and are not reported. A
    missing or unreadable directory yields an empty list.

    Args:
        path: Destination directory.

    Returns:
        LocalFiles sorted by name.
    """
    try:
        entries = sorted(path.iterdir())
    except OSError:
        return []

    files: list[LocalFile] = []
    for entry in entries:
        try:
            if not entry.is_file():
                continue
            files.append(LocalFile(name=entry.name, size_kb=size_kb(entry.stat().st_size)))
        except OSError:
            # Vanished or unreadable between listing and stat
            continue

    return files
