"""Unit tests for documentation snapshots and the repository."""

import json

import pytest
import yaml

from archdocs.documentation import Documentation
from archdocs.documentation import DocumentationState
from archdocs.exceptions import DanglingReferenceError
from archdocs.exceptions import SnapshotFormatError
from archdocs.models import Format
from archdocs.models import Model
from archdocs.models import SectionType
from archdocs.persistence import DocumentationRepository
from archdocs.persistence import DocumentationSnapshot
from archdocs.persistence import dump_snapshot
from archdocs.persistence import parse_snapshot
from archdocs.storage import LocalStorageBackend


@pytest.fixture
def documentation(model, software_system, container, tmp_path, image_factory):
    docs = Documentation(model)
    docs.add_for_software_system(software_system, SectionType.CONTEXT, Format.MARKDOWN, "# Context")
    docs.add_for_software_system(software_system, SectionType.DATA, Format.ASCIIDOC, "= Data")
    docs.add_for_container(container, Format.MARKDOWN, "## Components")
    docs.add_images(image_factory("context.png", directory=tmp_path / "images").parent)
    return docs


@pytest.fixture
def repository(tmp_path):
    return DocumentationRepository(LocalStorageBackend(tmp_path / "store"))


class TestSnapshot:
    def test_flat_records(self, documentation):
        data = DocumentationSnapshot.from_documentation(documentation).to_data()

        assert data["sections"][0] == {
            "elementId": "1",
            "type": "Context",
            "format": "Markdown",
            "content": "# Context",
        }
        assert len(data["sections"]) == 3
        assert data["images"][0]["name"] == "context.png"
        assert data["images"][0]["contentType"] == "image/png"

    def test_json_and_yaml_rendering(self, documentation):
        snapshot = DocumentationSnapshot.from_documentation(documentation)

        assert json.loads(dump_snapshot(snapshot, "docs.json")) == snapshot.to_data()
        assert yaml.safe_load(dump_snapshot(snapshot, "docs.YML")) == snapshot.to_data()

    def test_unknown_extension(self, documentation):
        snapshot = DocumentationSnapshot.from_documentation(documentation)

        with pytest.raises(SnapshotFormatError):
            dump_snapshot(snapshot, "docs.xml")
        with pytest.raises(SnapshotFormatError):
            parse_snapshot("", "docs.xml")

    @pytest.mark.parametrize(
        "text, path",
        [
            ("{not json", "docs.json"),
            ("sections: [unclosed", "docs.yaml"),
            ('{"sections": [{"elementId": "1"}]}', "docs.json"),
        ],
    )
    def test_invalid_content(self, text, path):
        with pytest.raises(SnapshotFormatError) as exc_info:
            parse_snapshot(text, path)

        assert exc_info.value.details["path"] == path

    def test_empty_yaml_is_empty_snapshot(self):
        snapshot = parse_snapshot("", "docs.yaml")

        assert snapshot.sections == []
        assert snapshot.images == []


class TestRepository:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["workspace/docs.json", "workspace/docs.yaml"])
    async def test_save_and_load(self, repository, documentation, model, path):
        info = await repository.save(documentation, path)
        assert info is not None and info.size > 0

        loaded = await repository.load(model, path)

        assert loaded.state == DocumentationState.HYDRATED
        assert loaded.sections == documentation.sections
        assert loaded.images == documentation.images
        for section in loaded.sections:
            assert section.element is model.get_element(section.element_id)
        restored = loaded.get_section("1", SectionType.DATA)
        assert restored.format == Format.ASCIIDOC
        assert restored.content == "= Data"

    @pytest.mark.asyncio
    async def test_load_against_model_missing_elements(self, repository, documentation):
        await repository.save(documentation, "docs.json")
        partial = Model()
        partial.add_software_system("Internet Banking System")

        with pytest.raises(DanglingReferenceError) as exc_info:
            await repository.load(partial, "docs.json")

        assert exc_info.value.details["element_id"] == "2"

    @pytest.mark.asyncio
    async def test_load_missing_snapshot(self, repository, model):
        with pytest.raises(FileNotFoundError):
            await repository.load(model, "missing.json")

    @pytest.mark.asyncio
    async def test_list_snapshots(self, repository, documentation):
        await repository.save(documentation, "a.json")
        await repository.save(documentation, "b.yml")
        await repository.storage.write_file("notes.txt", "ignored")

        assert await repository.list_snapshots() == ["a.json", "b.yml"]

    def test_sync_wrappers(self, repository, documentation, model):
        repository.save_sync(documentation, "docs.json")

        loaded = repository.load_sync(model, "docs.json")

        assert loaded.sections == documentation.sections
