"""Documentation sections and images for architecture model workspaces."""

from .documentation import Documentation
from .documentation import DocumentationState
from .exceptions import ArchDocsError
from .exceptions import DanglingReferenceError
from .exceptions import DuplicateSectionError
from .exceptions import FileSystemError
from .exceptions import ImageIngestionError
from .exceptions import ModelNotBoundError
from .exceptions import SnapshotFormatError
from .exceptions import UnresolvedElementError
from .images import ImageStore
from .models import Container
from .models import Element
from .models import ElementLookup
from .models import Format
from .models import Image
from .models import Model
from .models import Section
from .models import SectionType
from .models import SoftwareSystem
from .persistence import DocumentationRepository
from .persistence import DocumentationSnapshot
from .sections import SectionStore

__all__ = [
    "ArchDocsError",
    "Container",
    "DanglingReferenceError",
    "Documentation",
    "DocumentationRepository",
    "DocumentationSnapshot",
    "DocumentationState",
    "DuplicateSectionError",
    "Element",
    "ElementLookup",
    "FileSystemError",
    "Format",
    "Image",
    "ImageIngestionError",
    "ImageStore",
    "Model",
    "ModelNotBoundError",
    "Section",
    "SectionStore",
    "SectionType",
    "SnapshotFormatError",
    "SoftwareSystem",
    "UnresolvedElementError",
]
