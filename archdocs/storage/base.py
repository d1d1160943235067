"""Storage interface used by the documentation repository."""
from __future__ import annotations


from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass
class FileInfo:
    """Size and modification time of a saved snapshot."""

    path: str
    size: int
    last_modified: datetime
    content_type: str = "application/json"


class StorageBackend(ABC):
    """Where documentation snapshots are written to and read from.

    Paths are always relative to the backend's own root.
    """

    @abstractmethod
    async def read_file(self, path: str) -> str:
        """Return the text stored at ``path``.

        Raises:
            FileNotFoundError: If nothing is stored at ``path``
        """

    @abstractmethod
    async def write_file(self, path: str, content: str) -> None:
        """Store ``content`` at ``path``, replacing any previous snapshot."""

    @abstractmethod
    async def get_file_info(self, path: str) -> FileInfo | None:
        """Describe the snapshot at ``path``, or None when there is none."""

    @abstractmethod
    async def list_files(self, path: str = "", pattern: str = "*.json") -> list[str]:
        """List snapshot paths under ``path`` whose file name matches ``pattern``."""
