"""Snapshots stored as files under a local directory."""

from __future__ import annotations

import fnmatch
from datetime import datetime
from datetime import timezone
from pathlib import Path

from .base import FileInfo
from .base import StorageBackend

_SNAPSHOT_CONTENT_TYPES = {
    ".json": "application/json",
    ".yaml": "text/yaml",
    ".yml": "text/yaml",
}


class LocalStorageBackend(StorageBackend):
    """Keeps snapshots in ``root_dir``, which is created if missing."""

    def __init__(self, root_dir: str | Path = "."):
        self._root = Path(root_dir).resolve()
        self._root.mkdir(parents=True, exist_ok=True)

    def _resolve(self, path: str) -> Path:
        return self._root / path

    async def read_file(self, path: str) -> str:
        target = self._resolve(path)
        if not target.is_file():
            raise FileNotFoundError(f"No snapshot at {path}")
        return target.read_text(encoding="utf-8")

    async def write_file(self, path: str, content: str) -> None:
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    async def get_file_info(self, path: str) -> FileInfo | None:
        target = self._resolve(path)
        if not target.is_file():
            return None

        stat = target.stat()
        return FileInfo(
            path=path,
            size=stat.st_size,
            last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            content_type=_SNAPSHOT_CONTENT_TYPES.get(target.suffix.lower(), "application/octet-stream"),
        )

    async def list_files(self, path: str = "", pattern: str = "*.json") -> list[str]:
        directory = self._resolve(path)
        if not directory.is_dir():
            return []

        return sorted(
            f"{path}/{entry.name}" if path else entry.name
            for entry in directory.iterdir()
            if entry.is_file() and fnmatch.fnmatch(entry.name, pattern)
        )
