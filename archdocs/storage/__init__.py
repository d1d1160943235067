"""Storage abstraction layer for documentation snapshots.

Usage:
    from archdocs.storage import LocalStorageBackend

    storage = LocalStorageBackend("workspace")
    await storage.write_file("docs.json", payload)
"""

from .base import FileInfo
from .base import StorageBackend
from .local import LocalStorageBackend

__all__ = ["FileInfo", "LocalStorageBackend", "StorageBackend"]
