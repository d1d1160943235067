"""Section store: at most one documentation section per (element, type)."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from .exceptions import DuplicateSectionError
from .exceptions import FileSystemError
from .models import Container
from .models import Element
from .models import Format
from .models import Section
from .models import SectionKey
from .models import SectionType
from .models import SoftwareSystem


def _read_text(path: str | PathLike) -> str:
    """Read a whole file as UTF-8 text, line endings untouched."""
    file_path = Path(path)
    try:
        return file_path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise FileSystemError("read", str(file_path), f"not valid UTF-8 ({e.reason})") from e


class SectionStore:
    """Holds documentation sections keyed by ``(element_id, type)``."""

    def __init__(self) -> None:
        self._sections: dict[SectionKey, Section] = {}

    def __len__(self) -> int:
        return len(self._sections)

    def add(self, element: Element, section_type: SectionType, format: Format, content: str) -> Section:
        """Add a section for any element, refusing a second section of the same type."""
        section = Section.for_element(element, section_type, format, content)
        if section.key in self._sections:
            raise DuplicateSectionError(element.id, section_type.value)
        self._sections[section.key] = section
        return section

    def add_for_software_system(
        self, software_system: SoftwareSystem, section_type: SectionType, format: Format, content: str
    ) -> Section:
        return self.add(software_system, section_type, format, content)

    def add_for_container(self, container: Container, format: Format, content: str) -> Section:
        return self.add(container, SectionType.COMPONENTS, format, content)

    def add_from_file(
        self, element: Element, section_type: SectionType, format: Format, path: str | PathLike
    ) -> Section:
        """Add a section whose content is the UTF-8 text of ``path``.

        Raises:
            FileNotFoundError: If the file does not exist
            FileSystemError: If the file is not valid UTF-8
            DuplicateSectionError: If the element already has a section of this type
        """
        return self.add(element, section_type, format, _read_text(path))

    def add_container_from_file(self, container: Container, format: Format, path: str | PathLike) -> Section:
        return self.add_for_container(container, format, _read_text(path))

    def get(self, element_id: str, section_type: SectionType) -> Section | None:
        return self._sections.get((element_id, section_type))

    def get_all(self) -> set[Section]:
        """Return a copy of all sections; changing it does not affect the store."""
        return set(self._sections.values())

    def replace_all(self, sections: Iterable[Section]) -> None:
        """Replace the store contents wholesale, without duplicate checks.

        Used when restoring persisted state. The store keeps unlinked copies,
        so sections must be hydrated again. A repeated key keeps the last
        section given.
        """
        self._sections = {section.key: section.detached() for section in sections}
