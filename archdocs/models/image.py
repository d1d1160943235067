"""Base64-encoded image assets attached to a workspace."""

from __future__ import annotations

import base64
import hashlib

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic.alias_generators import to_camel


class Image(BaseModel):
    """A named, content-typed, base64-encoded image.

    Images are immutable and compare by value, so two images with the same
    name, content type and payload collapse into one.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: str
    content_type: str = Field(description="MIME type, e.g. image/png")
    content: str = Field(description="Base64-encoded image bytes")

    @property
    def fingerprint(self) -> str:
        """SHA-256 digest over all three attributes, used for deduplication."""
        key = f"{self.name}|{self.content_type}|{self.content}".encode("utf-8")
        return hashlib.sha256(key).hexdigest()

    def decode(self) -> bytes:
        return base64.b64decode(self.content)
