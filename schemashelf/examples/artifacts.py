"""
Artifact lifecycle walkthrough.

Creates an Avro ``User`` schema artifact, adds a second version with an
optional ``email`` field, lists the versions and prints the content of
each one.
"""

from __future__ import annotations

from ..registry.client import RegistryClient
from ..registry.config import RegistrySettings
from ..registry.schemas import CreateArtifact, CreateVersion, VersionContent
from .payloads import AVRO_SCHEMA_V1, AVRO_SCHEMA_V2
from .runner import print_versions, run_example


def steps(client: RegistryClient, settings: RegistrySettings) -> None:
    group_id, artifact_id = settings.group_id, settings.artifact_id

    print(". Creating artifact with initial schema...")
    created = client.create_artifact(
        group_id,
        CreateArtifact(
            artifact_id=artifact_id,
            artifact_type="AVRO",
            name="User Schema",
            description="Example user schema for demonstration",
            first_version=CreateVersion(
                version="1.0.0",
                content=VersionContent(content=AVRO_SCHEMA_V1, content_type="application/json"),
            ),
        ),
    )
    print(f". Created artifact: {created.artifact.artifact_id}")
    if created.version is not None:
        print(f". Version: {created.version.version}")

    print("\n. Fetching artifact metadata...")
    metadata = client.get_artifact_metadata(group_id, artifact_id)
    print(f". Artifact ID: {metadata.artifact_id}")
    print(f". Group ID: {metadata.group_id}")
    print(f". Type: {metadata.artifact_type}")
    print(f". Name: {metadata.name}")
    print(f". Description: {metadata.description}")
    print(f". Created On: {metadata.created_on}")
    print(f". Modified On: {metadata.modified_on}")

    print("\n. Creating new version (v2) with additional field...")
    version = client.create_version(
        group_id,
        artifact_id,
        CreateVersion(
            version="2.0.0",
            content=VersionContent(content=AVRO_SCHEMA_V2, content_type="application/json"),
        ),
    )
    print(f". Created version: {version.version}")

    print("\n Listing all versions...")
    print_versions(client, group_id, artifact_id)

    for label in ("1.0.0", "2.0.0"):
        print(f"\n Retrieving version {label} content...")
        print(f". Version {label} schema:")
        print(client.get_version_content(group_id, artifact_id, label))

    print("\n Tip: the artifact is now visible in the registry UI")


def main() -> int:
    return run_example("Artifacts Example", steps)


if __name__ == "__main__":
    raise SystemExit(main())
