"""Saving and loading documentation aggregates.

A snapshot is the flat list of sections and images of one aggregate. It is
written as JSON or YAML depending on the file extension, and loading always
restores the stores and then hydrates against the given model.
"""

from __future__ import annotations

import json
from pathlib import PurePosixPath
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError

from .config import get_settings
from .documentation import Documentation
from .exceptions import SnapshotFormatError
from .models import ElementLookup
from .models import Image
from .models import Section
from .storage import FileInfo
from .storage import StorageBackend

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


class DocumentationSnapshot(BaseModel):
    """Serializable state of a documentation aggregate."""

    sections: list[Section] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)

    @classmethod
    def from_documentation(cls, documentation: Documentation) -> DocumentationSnapshot:
        return cls(
            sections=sorted(documentation.sections, key=lambda section: section.key),
            images=sorted(documentation.images, key=lambda image: (image.name, image.fingerprint)),
        )

    def to_data(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def restore_into(self, documentation: Documentation) -> None:
        documentation.restore(self.sections, self.images)


def _suffix(path: str) -> str:
    return PurePosixPath(path).suffix.lower()


def dump_snapshot(snapshot: DocumentationSnapshot, path: str) -> str:
    """Render a snapshot in the format implied by ``path``."""
    suffix = _suffix(path)
    if suffix in JSON_SUFFIXES:
        return json.dumps(snapshot.to_data(), indent=get_settings().snapshot_indent, ensure_ascii=False)
    if suffix in YAML_SUFFIXES:
        return yaml.dump(snapshot.to_data(), default_flow_style=False, allow_unicode=True, sort_keys=False)
    raise SnapshotFormatError(path, f"unsupported snapshot extension '{suffix}'")


def parse_snapshot(text: str, path: str) -> DocumentationSnapshot:
    """Parse snapshot text in the format implied by ``path``."""
    suffix = _suffix(path)
    try:
        if suffix in JSON_SUFFIXES:
            data = json.loads(text)
        elif suffix in YAML_SUFFIXES:
            data = yaml.safe_load(text) or {}
        else:
            raise SnapshotFormatError(path, f"unsupported snapshot extension '{suffix}'")
        return DocumentationSnapshot.model_validate(data)
    except (json.JSONDecodeError, yaml.YAMLError, ValidationError) as e:
        raise SnapshotFormatError(path, str(e)) from e


class DocumentationRepository:
    """Persists documentation aggregates through a storage backend."""

    def __init__(self, storage: StorageBackend):
        self.storage = storage

    async def save(self, documentation: Documentation, path: str) -> FileInfo | None:
        content = dump_snapshot(DocumentationSnapshot.from_documentation(documentation), path)
        await self.storage.write_file(path, content)
        return await self.storage.get_file_info(path)

    async def load(self, model: ElementLookup, path: str) -> Documentation:
        """Load a snapshot and return a hydrated aggregate bound to ``model``.

        Raises:
            FileNotFoundError: If the snapshot does not exist
            SnapshotFormatError: If the snapshot cannot be parsed
            DanglingReferenceError: If a section refers to an element missing from ``model``
        """
        snapshot = parse_snapshot(await self.storage.read_file(path), path)
        documentation = Documentation(model)
        snapshot.restore_into(documentation)
        documentation.hydrate()
        return documentation

    async def list_snapshots(self, path: str = "") -> list[str]:
        found: list[str] = []
        for suffix in JSON_SUFFIXES + YAML_SUFFIXES:
            found.extend(await self.storage.list_files(path, f"*{suffix}"))
        return sorted(found)

    # === Sync Wrappers ===

    def save_sync(self, documentation: Documentation, path: str) -> FileInfo | None:
        import asyncio

        return asyncio.run(self.save(documentation, path))

    def load_sync(self, model: ElementLookup, path: str) -> Documentation:
        import asyncio

        return asyncio.run(self.load(model, path))
