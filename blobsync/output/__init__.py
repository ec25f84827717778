# blobsync Output Module
# Rich console output

from blobsync.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
