"""
Publish the library service's API description to the registry.

Uploads the description named by ``LibrarySettings`` (the packaged
``schemashelf/library/openapi.yaml`` unless ``LIBRARY_DOCS_PATH`` says
otherwise) as an OPENAPI artifact, ``group001/library-api`` version
``LIBRARY_DOCS_VERSION`` (``1.0.0``) by default, so that the service can
be started with ``LIBRARY_DOCS_SOURCE=registry``. When the artifact
already exists the description is added as a new version.
"""

from __future__ import annotations

import logging
import sys

from pydantic import ValidationError as PydanticValidationError

from ..library.config import DOCS_ARTIFACT_ID, DOCS_GROUP_ID, LibrarySettings
from ..registry.client import RegistryClient
from ..registry.config import RegistrySettings
from ..registry.errors import ConflictError
from ..registry.schemas import CreateArtifact, CreateVersion, VersionContent
from .runner import configure_logging, run_example


logger = logging.getLogger(__name__)

YAML_CONTENT_TYPE = "application/x-yaml"


def publish(
    client: RegistryClient, settings: RegistrySettings, library: LibrarySettings
) -> None:
    group_id, artifact_id = settings.group_id, settings.artifact_id
    label = library.docs_version
    version = CreateVersion(
        version=label,
        content=VersionContent(
            content=library.docs_path.read_text(encoding="utf-8"),
            content_type=YAML_CONTENT_TYPE,
        ),
    )

    print(f". Publishing {library.docs_path.name} as version {label}...")
    try:
        created = client.create_artifact(
            group_id,
            CreateArtifact(
                artifact_id=artifact_id,
                artifact_type="OPENAPI",
                name="Library API",
                description="OpenAPI description of the library book service",
                first_version=version,
            ),
        )
        print(f". Created artifact: {created.artifact.artifact_id}")
    except ConflictError:
        logger.info("Artifact %s/%s exists, adding a version", group_id, artifact_id)
        client.create_version(group_id, artifact_id, version)
        print(f". Added version to existing artifact: {artifact_id}")

    latest = client.get_version_content(group_id, artifact_id)
    print(f". Latest version content is {len(latest)} characters")


def main() -> int:
    try:
        library = LibrarySettings.from_environment()
    except PydanticValidationError as exc:
        configure_logging()
        logger.error("Invalid library configuration: %s", exc)
        print(f"\n Error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    return run_example(
        "Publish Library Docs",
        lambda client, settings: publish(client, settings, library),
        group_id=DOCS_GROUP_ID,
        artifact_id=DOCS_ARTIFACT_ID,
    )


if __name__ == "__main__":
    raise SystemExit(main())
