"""Documentation section model.

A section is identified by the element it documents and its type; two
sections with the same ``(element_id, type)`` are equal regardless of
format or content.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import PrivateAttr
from pydantic.alias_generators import to_camel

from ..exceptions import UnresolvedElementError
from .elements import Element


class SectionType(str, Enum):
    """The kind of documentation a section holds."""

    CONTEXT = "Context"
    FUNCTIONAL_OVERVIEW = "FunctionalOverview"
    QUALITY_ATTRIBUTES = "QualityAttributes"
    CONSTRAINTS = "Constraints"
    PRINCIPLES = "Principles"
    SOFTWARE_ARCHITECTURE = "SoftwareArchitecture"
    CONTAINERS = "Containers"
    COMPONENTS = "Components"
    CODE = "Code"
    DATA = "Data"
    INFRASTRUCTURE_ARCHITECTURE = "InfrastructureArchitecture"
    DEPLOYMENT = "Deployment"
    DEVELOPMENT_ENVIRONMENT = "DevelopmentEnvironment"
    OPERATION_AND_SUPPORT = "OperationAndSupport"
    DECISION_LOG = "DecisionLog"

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. "Functional Overview"."""
        return _TITLES.get(self, self.value)


_TITLES = {
    SectionType.FUNCTIONAL_OVERVIEW: "Functional Overview",
    SectionType.QUALITY_ATTRIBUTES: "Quality Attributes",
    SectionType.SOFTWARE_ARCHITECTURE: "Software Architecture",
    SectionType.INFRASTRUCTURE_ARCHITECTURE: "Infrastructure Architecture",
    SectionType.DEVELOPMENT_ENVIRONMENT: "Development Environment",
    SectionType.OPERATION_AND_SUPPORT: "Operation and Support",
    SectionType.DECISION_LOG: "Decision Log",
}


class Format(str, Enum):
    """Markup format of a section's content."""

    MARKDOWN = "Markdown"
    ASCIIDOC = "AsciiDoc"
    TEXT = "Text"


SectionKey = tuple[str, SectionType]


class Section(BaseModel):
    """A block of documentation tied to one element and one type.

    ``element_id`` is always present. The resolved ``element`` is only
    available once the section has been attached to a live element, either
    when it was added or by hydration after a restore.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    element_id: str
    type: SectionType
    format: Format
    content: str

    _element: Element | None = PrivateAttr(default=None)

    @classmethod
    def for_element(cls, element: Element, section_type: SectionType, format: Format, content: str) -> Section:
        section = cls(element_id=element.id, type=section_type, format=format, content=content)
        section.attach(element)
        return section

    @property
    def key(self) -> SectionKey:
        return (self.element_id, self.type)

    @property
    def is_hydrated(self) -> bool:
        return self._element is not None

    @property
    def element(self) -> Element:
        if self._element is None:
            raise UnresolvedElementError(self.element_id)
        return self._element

    def attach(self, element: Element) -> None:
        """Link this section to its live element."""
        if element.id != self.element_id:
            raise ValueError(f"Element {element.id} does not match section element {self.element_id}")
        self._element = element

    def detached(self) -> Section:
        """Copy of this section with no resolved element."""
        return Section.model_validate(self.model_dump())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)
