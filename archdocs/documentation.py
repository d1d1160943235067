"""The documentation aggregate of a workspace.

Owns the section and image stores and re-links sections to their model
elements after the aggregate has been restored from persisted state.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from os import PathLike

from .config import get_settings
from .exceptions import DanglingReferenceError
from .exceptions import ModelNotBoundError
from .exceptions import UnresolvedElementError
from .images import ImageStore
from .logger_config import ErrorCategory
from .logger_config import log_operation
from .logger_config import log_structured_error
from .models import Container
from .models import Element
from .models import ElementLookup
from .models import Format
from .models import Image
from .models import Section
from .models import SectionType
from .models import SoftwareSystem
from .sections import SectionStore


class DocumentationState(str, Enum):
    """Lifecycle of a documentation aggregate."""

    UNINITIALIZED = "uninitialized"
    BOUND = "bound"
    RESTORED = "restored"
    HYDRATED = "hydrated"


class Documentation:
    """Sections and images attached to an architecture model."""

    def __init__(self, model: ElementLookup | None = None):
        self._model = model
        self._sections = SectionStore()
        self._images = ImageStore()
        self._state = DocumentationState.BOUND if model is not None else DocumentationState.UNINITIALIZED

    def __repr__(self) -> str:
        return (
            f"Documentation(state={self._state.value}, sections={len(self._sections)}, "
            f"images={len(self._images)})"
        )

    @property
    def model(self) -> ElementLookup | None:
        return self._model

    @model.setter
    def model(self, model: ElementLookup) -> None:
        self._model = model
        if self._state == DocumentationState.UNINITIALIZED:
            self._state = DocumentationState.BOUND

    @property
    def state(self) -> DocumentationState:
        return self._state

    @property
    def is_hydrated(self) -> bool:
        """True when section-to-element links may be read."""
        return self._state != DocumentationState.RESTORED

    # === Sections ===

    @log_operation
    def add_for_software_system(
        self, software_system: SoftwareSystem, section_type: SectionType, format: Format, content: str
    ) -> Section:
        return self._sections.add_for_software_system(software_system, section_type, format, content)

    @log_operation
    def add_for_container(self, container: Container, format: Format, content: str) -> Section:
        return self._sections.add_for_container(container, format, content)

    @log_operation
    def add_from_file(
        self, element: Element, section_type: SectionType, format: Format, path: str | PathLike
    ) -> Section:
        return self._sections.add_from_file(element, section_type, format, path)

    @log_operation
    def add_container_from_file(self, container: Container, format: Format, path: str | PathLike) -> Section:
        return self._sections.add_container_from_file(container, format, path)

    @property
    def sections(self) -> set[Section]:
        return self._sections.get_all()

    def get_section(self, element_id: str, section_type: SectionType) -> Section | None:
        return self._sections.get(element_id, section_type)

    def sections_for(self, element: Element) -> list[Section]:
        """Sections documenting ``element``, ordered by type.

        Raises:
            UnresolvedElementError: If the aggregate was restored but not yet hydrated
        """
        if not self.is_hydrated:
            raise UnresolvedElementError(element.id)
        order = list(SectionType)
        found = [section for section in self._sections.get_all() if section.element_id == element.id]
        return sorted(found, key=lambda section: order.index(section.type))

    # === Images ===

    @log_operation
    def add_images(self, path: str | PathLike | None) -> list[Image]:
        return self._images.ingest_directory(path)

    @property
    def images(self) -> set[Image]:
        return self._images.get_all()

    # === Restore and Hydration ===

    def restore(self, sections: Iterable[Section], images: Iterable[Image]) -> None:
        """Replace both stores with persisted state; hydrate() must follow."""
        self._sections.replace_all(sections)
        self._images.replace_all(images)
        self._state = DocumentationState.RESTORED

    @log_operation
    def hydrate(self) -> None:
        """Link every section to its element in the bound model.

        Safe to call more than once. In strict mode (the default) an
        unknown element identifier fails the whole call before any section
        is linked; otherwise such sections are logged and left unresolved.

        Raises:
            ModelNotBoundError: If no model is bound
            DanglingReferenceError: If a section's element does not exist (strict mode)
        """
        if self._model is None:
            raise ModelNotBoundError("hydrate")

        resolved: list[tuple[Section, Element]] = []
        dangling: list[Section] = []
        for section in self._sections.get_all():
            element = self._model.get_element(section.element_id)
            if element is None:
                dangling.append(section)
            else:
                resolved.append((section, element))

        if dangling:
            first = min(dangling, key=lambda section: section.key)
            if get_settings().strict_hydration:
                raise DanglingReferenceError(first.element_id, first.type.value)
            for section in dangling:
                log_structured_error(
                    category=ErrorCategory.WARNING,
                    message=f"Section {section.type.value} refers to unknown element {section.element_id}",
                    operation="hydrate",
                    context={"element_id": section.element_id, "section_type": section.type.value},
                )

        for section, element in resolved:
            section.attach(element)
        self._state = DocumentationState.HYDRATED
