"""Image store: ingests image files from a directory as base64 records."""

from __future__ import annotations

import base64
import io
import logging
import mimetypes
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from .config import get_settings
from .exceptions import ImageIngestionError
from .models import Image

logger = logging.getLogger(__name__)

# Pillow cannot write these modes as JPEG
_JPEG_INCOMPATIBLE_MODES = {"RGBA", "LA", "P", "PA", "I;16", "I", "F"}


def _content_type_for(filename: str) -> str:
    """Determine the MIME type from the file extension."""
    content_type, _ = mimetypes.guess_type(filename)
    if content_type is None or not content_type.startswith("image/"):
        raise ImageIngestionError(filename, "unknown image content type")
    return content_type


def _reencode(file_path: Path, content_type: str) -> bytes:
    """Decode an image file and encode it again in the format of ``content_type``."""
    target_format = content_type.split("/")[1].upper()
    try:
        with PILImage.open(file_path) as img:
            img.load()
            if target_format == "JPEG" and img.mode in _JPEG_INCOMPATIBLE_MODES:
                img = img.convert("RGB")
            buffer = io.BytesIO()
            img.save(buffer, format=target_format)
    except (UnidentifiedImageError, OSError, ValueError, KeyError) as e:
        raise ImageIngestionError(str(file_path), f"cannot decode or encode image: {e}") from e
    return buffer.getvalue()


class ImageStore:
    """Holds images as a value-deduplicating set keyed by their fingerprint."""

    def __init__(self) -> None:
        self._images: dict[str, Image] = {}

    def __len__(self) -> int:
        return len(self._images)

    def _matches(self, entry: Path, extensions: tuple[str, ...]) -> bool:
        return entry.is_file() and entry.name.lower().endswith(extensions)

    def ingest_directory(self, path: str | PathLike | None) -> list[Image]:
        """Import every png/jpg/jpeg/gif file directly inside ``path``.

        Missing paths, ``None`` and non-directories are ignored. Each image is
        decoded and re-encoded before being stored as base64.

        Returns:
            The images created by this call, in file name order

        Raises:
            ImageIngestionError: If a matching file is not a readable image.
                Unless atomic ingestion is configured, images processed
                before the failing file stay in the store.
        """
        if path is None:
            return []
        directory = Path(path)
        if not directory.is_dir():
            logger.debug("Skipping image ingestion, %s is not a directory", directory)
            return []

        settings = get_settings()
        extensions = tuple(settings.image_extensions)
        files = sorted(entry for entry in directory.iterdir() if self._matches(entry, extensions))

        ingested: list[Image] = []
        for file_path in files:
            content_type = _content_type_for(file_path.name)
            encoded = base64.b64encode(_reencode(file_path, content_type)).decode("ascii")
            image = Image(name=file_path.name, content_type=content_type, content=encoded)
            ingested.append(image)
            if not settings.atomic_image_ingestion:
                self._images[image.fingerprint] = image

        if settings.atomic_image_ingestion:
            for image in ingested:
                self._images[image.fingerprint] = image

        logger.info("Ingested %d image(s) from %s", len(ingested), directory)
        return ingested

    def get_all(self) -> set[Image]:
        """Return a copy of all images; changing it does not affect the store."""
        return set(self._images.values())

    def replace_all(self, images: Iterable[Image]) -> None:
        self._images = {image.fingerprint: image for image in images}
