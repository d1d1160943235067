"""Domain models for the archdocs system.

- elements: architecture model elements and the element lookup
- section: documentation sections with their type and format
- image: base64-encoded image assets
"""

from .elements import Container
from .elements import Element
from .elements import ElementLookup
from .elements import Model
from .elements import SoftwareSystem
from .image import Image
from .section import Format
from .section import Section
from .section import SectionKey
from .section import SectionType

__all__ = [
    # elements
    "Container",
    "Element",
    "ElementLookup",
    "Model",
    "SoftwareSystem",
    # image
    "Image",
    # section
    "Format",
    "Section",
    "SectionKey",
    "SectionType",
]
