"""The pytest configuration for archdocs testing."""

import os
import tempfile

import pytest
from PIL import Image as PILImage

# Keep the rotating call log out of the working tree; read at import of archdocs
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="archdocs-logs-"))

from archdocs.config import reset_settings  # noqa: E402
from archdocs.models import Model  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so environment overrides apply."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def model():
    """A model with one software system and one of its containers."""
    m = Model()
    system = m.add_software_system("Internet Banking System", "Lets customers view their accounts")
    m.add_container(system, "Web Application", technology="Java and Spring MVC")
    return m


@pytest.fixture
def software_system(model):
    return model.get_element("1")


@pytest.fixture
def container(model):
    return model.get_element("2")


@pytest.fixture
def image_factory(tmp_path):
    """Factory for writing small real image files into a directory."""

    def _create_image(name: str, directory=None, fmt: str | None = None, color=(255, 0, 0)):
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        PILImage.new("RGB", (4, 4), color).save(path, format=fmt or _format_for(name))
        return path

    return _create_image


def _format_for(name: str) -> str:
    ext = name.rsplit(".", 1)[-1].lower()
    return {"jpg": "JPEG", "jpeg": "JPEG", "gif": "GIF", "png": "PNG"}[ext]
