"""
Tests for loading the library's API description and its settings.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from schemashelf.library.config import DEFAULT_DOCS_PATH, LibrarySettings
from schemashelf.library.docs import load_docs_file, load_docs_spec, parse_docs
from schemashelf.registry import CreateArtifact, CreateVersion, NotFoundError, RegistryClient, VersionContent


class TestParseDocs:
    def test_yaml_and_json_both_accepted(self) -> None:
        assert parse_docs("openapi: '3.0.3'\npaths: {}\n", "yaml") == {"openapi": "3.0.3", "paths": {}}
        assert parse_docs('{"openapi": "3.0.3", "paths": {}}', "json") == {"openapi": "3.0.3", "paths": {}}

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_docs("- just\n- a list\n", "list")

    def test_unparsable_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_docs("openapi: [unclosed", "broken")


class TestLoadDocs:
    def test_packaged_file_is_default(self) -> None:
        document = load_docs_spec(LibrarySettings())
        assert document == load_docs_file(DEFAULT_DOCS_PATH)
        assert "/books" in document["paths"]

    def test_custom_file(self, tmp_path: Path) -> None:
        path = tmp_path / "api.yaml"
        path.write_text("openapi: '3.0.3'\ninfo:\n  title: Local\npaths: {}\n", encoding="utf-8")
        document = load_docs_spec(LibrarySettings(docs_path=path))
        assert document["info"]["title"] == "Local"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_docs_spec(LibrarySettings(docs_path=tmp_path / "absent.yaml"))

    def test_loaded_from_registry(self, client: RegistryClient) -> None:
        client.create_artifact(
            "group001",
            CreateArtifact(
                artifact_id="library-api",
                artifact_type="OPENAPI",
                first_version=CreateVersion(
                    version="1.0.0",
                    content=VersionContent(
                        content=DEFAULT_DOCS_PATH.read_text(encoding="utf-8"),
                        content_type="application/x-yaml",
                    ),
                ),
            ),
        )
        settings = LibrarySettings(docs_source="registry")
        assert load_docs_spec(settings, client=client) == load_docs_file(DEFAULT_DOCS_PATH)

    def test_missing_registry_version_raises(self, client: RegistryClient) -> None:
        with pytest.raises(NotFoundError):
            load_docs_spec(LibrarySettings(docs_source="registry"), client=client)


class TestLibrarySettings:
    def test_defaults(self) -> None:
        settings = LibrarySettings.from_environment({})
        assert settings.port == 3000
        assert settings.docs_source == "file"
        assert settings.registry.group_id == "group001"
        assert settings.registry.artifact_id == "library-api"

    def test_environment_overrides(self) -> None:
        settings = LibrarySettings.from_environment(
            {
                "LIBRARY_PORT": "8000",
                "LIBRARY_DOCS_SOURCE": "Registry",
                "LIBRARY_DOCS_VERSION": "2.0.0",
                "REGISTRY_URL": "http://registry:8080/apis/registry/v3",
                "ARTIFACT_ID": "books",
            }
        )
        assert settings.port == 8000
        assert settings.docs_source == "registry"
        assert settings.docs_version == "2.0.0"
        assert settings.registry.registry_url == "http://registry:8080/apis/registry/v3"
        assert settings.registry.artifact_id == "books"

    def test_invalid_values_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            LibrarySettings.from_environment({"LIBRARY_PORT": "http"})
        with pytest.raises(PydanticValidationError):
            LibrarySettings.from_environment({"LIBRARY_DOCS_SOURCE": "s3"})
