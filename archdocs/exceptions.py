"""Custom exception hierarchy for the archdocs system.

Every error raised by the documentation aggregate derives from
``ArchDocsError`` so callers can catch a single base class, while each
subclass carries a stable ``error_code`` and structured ``details``.
"""

from __future__ import annotations

from typing import Any


class ArchDocsError(Exception):
    """Base class for all archdocs errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        details: dict[str, Any] | None = None,
        user_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.user_message = user_message or message

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "details": self.details,
        }


class DuplicateSectionError(ArchDocsError):
    """A section of the same type already exists for the element."""

    def __init__(self, element_id: str, section_type: str, details: dict[str, Any] | None = None):
        merged = {"element_id": element_id, "section_type": section_type}
        merged.update(details or {})
        super().__init__(
            message=f"A section of type {section_type} already exists for element {element_id}.",
            error_code="DUPLICATE_SECTION",
            details=merged,
            user_message=f"Element '{element_id}' already has a '{section_type}' section.",
        )


class FileSystemError(ArchDocsError, OSError):
    """A file could not be read, decoded or written."""

    def __init__(self, operation: str, file_path: str, reason: str):
        super().__init__(
            message=f"File system operation '{operation}' failed for {file_path}: {reason}",
            error_code="FILE_SYSTEM_ERROR",
            details={
                "operation": operation,
                "file_path": file_path,
                "failure_reason": reason,
            },
            user_message=f"File operation failed: {reason}",
        )


class ImageIngestionError(FileSystemError):
    """An image file could not be decoded or re-encoded."""

    def __init__(self, file_path: str, reason: str):
        super().__init__("ingest_image", file_path, reason)


class DanglingReferenceError(ArchDocsError):
    """A section refers to an element that does not exist in the model."""

    def __init__(self, element_id: str, section_type: str):
        super().__init__(
            message=f"Section of type {section_type} refers to unknown element {element_id}.",
            error_code="DANGLING_REFERENCE",
            details={"element_id": element_id, "section_type": section_type},
            user_message=f"Element '{element_id}' does not exist in the model.",
        )


class ModelNotBoundError(ArchDocsError):
    """An operation needed a model but none has been bound."""

    def __init__(self, operation: str):
        super().__init__(
            message=f"Cannot {operation}: no model is bound to the documentation.",
            error_code="MODEL_NOT_BOUND",
            details={"operation": operation},
        )


class UnresolvedElementError(ArchDocsError):
    """A section's element was read before the section was hydrated."""

    def __init__(self, element_id: str):
        super().__init__(
            message=f"Element {element_id} has not been resolved; call hydrate() first.",
            error_code="UNRESOLVED_ELEMENT",
            details={"element_id": element_id},
        )


class SnapshotFormatError(ArchDocsError):
    """A documentation snapshot could not be parsed or has an unknown format."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Invalid documentation snapshot {path}: {reason}",
            error_code="SNAPSHOT_FORMAT_ERROR",
            details={"path": path, "failure_reason": reason},
            user_message=f"Could not read documentation snapshot: {reason}",
        )
