"""Architecture model elements referenced by documentation sections.

Only the narrow surface the documentation aggregate needs lives here:
elements with a stable identifier, and a lookup by that identifier.
"""

from __future__ import annotations

from typing import Protocol
from typing import runtime_checkable

from pydantic import BaseModel
from pydantic import Field


class Element(BaseModel):
    """Any addressable architecture model entity."""

    id: str
    name: str
    description: str = ""


class SoftwareSystem(Element):
    """A software system in the architecture model."""


class Container(Element):
    """A container (application, data store, ...) inside a software system."""

    software_system_id: str
    technology: str = ""


@runtime_checkable
class ElementLookup(Protocol):
    """Anything that can resolve an element identifier to a live element."""

    def get_element(self, identifier: str) -> Element | None: ...


class Model(BaseModel):
    """In-memory architecture model keyed by element identifier."""

    elements: dict[str, Element] = Field(default_factory=dict)

    def _next_id(self) -> str:
        return str(max((int(i) for i in self.elements if i.isdigit()), default=0) + 1)

    def add_software_system(self, name: str, description: str = "") -> SoftwareSystem:
        system = SoftwareSystem(id=self._next_id(), name=name, description=description)
        self.elements[system.id] = system
        return system

    def add_container(
        self, software_system: SoftwareSystem, name: str, description: str = "", technology: str = ""
    ) -> Container:
        container = Container(
            id=self._next_id(),
            name=name,
            description=description,
            technology=technology,
            software_system_id=software_system.id,
        )
        self.elements[container.id] = container
        return container

    def get_element(self, identifier: str) -> Element | None:
        return self.elements.get(identifier)
