"""
OpenAPI versioning walkthrough.

Registers the Pet Store API description, reads it back and summarises
its endpoints, publishes a second version with a ``/pets/{petId}``
resource, and compares the endpoints of the two versions.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from ..registry.client import RegistryClient
from ..registry.config import RegistrySettings
from ..registry.errors import ServerError
from ..registry.schemas import CreateArtifact, CreateVersion, VersionContent
from .payloads import OPENAPI_SPEC_V1, OPENAPI_SPEC_V2
from .runner import print_versions, run_example

GROUP_ID = "petstore-apis"
ARTIFACT_ID = "petstore-api-spec"


def fetch_spec(
    client: RegistryClient, group_id: str, artifact_id: str, version: str
) -> Dict[str, Any]:
    content = client.get_version_content(group_id, artifact_id, version)
    try:
        document = json.loads(content)
    except ValueError as exc:
        raise ServerError(f"Version {version} of {artifact_id} is not valid JSON") from exc
    if not isinstance(document, dict) or not isinstance(document.get("paths"), dict):
        raise ServerError(f"Version {version} of {artifact_id} has no 'paths' object")
    for path, item in document["paths"].items():
        if not isinstance(item, dict):
            raise ServerError(
                f"Version {version} of {artifact_id} has a malformed path item for {path}"
            )
    return document


def operations(path_item: Dict[str, Any]) -> List[str]:
    return [method for method in path_item if method != "parameters"]


def summarize(document: Dict[str, Any]) -> List[str]:
    """Print title, version and operations; return the endpoint paths."""
    info = document.get("info") or {}
    endpoints = list(document["paths"])
    print(f". API Title: {info.get('title')}")
    print(f". API Version: {info.get('version')}")
    print(f". Endpoints: {', '.join(endpoints)}")
    print(". Operations:")
    for path, item in document["paths"].items():
        print(f"   {path}: {', '.join(operations(item)).upper()}")
    return endpoints


def steps(client: RegistryClient, settings: RegistrySettings) -> None:
    group_id, artifact_id = settings.group_id, settings.artifact_id

    print(" Creating OpenAPI artifact with v1.0.0 specification...")
    created = client.create_artifact(
        group_id,
        CreateArtifact(
            artifact_id=artifact_id,
            artifact_type="OPENAPI",
            name="Pet Store API",
            description="OpenAPI specification for the Pet Store REST API",
            first_version=CreateVersion(
                version="1.0.0",
                content=VersionContent(content=OPENAPI_SPEC_V1, content_type="application/json"),
            ),
        ),
    )
    print(f". Created artifact: {created.artifact.artifact_id}")
    print(f". Type: {created.artifact.artifact_type}")
    if created.version is not None:
        print(f". Initial version: {created.version.version}")

    print("\n Fetching OpenAPI artifact metadata...")
    metadata = client.get_artifact_metadata(group_id, artifact_id)
    print(f". Artifact ID: {metadata.artifact_id}")
    print(f". Group ID: {metadata.group_id}")
    print(f". Type: {metadata.artifact_type}")
    print(f". Name: {metadata.name}")
    print(f". Description: {metadata.description}")
    print(f". Created On: {metadata.created_on}")

    print("\n Retrieving v1.0.0 OpenAPI specification...")
    v1_endpoints = summarize(fetch_spec(client, group_id, artifact_id, "1.0.0"))

    print("\n Creating v2.0.0 with additional endpoints...")
    version = client.create_version(
        group_id,
        artifact_id,
        CreateVersion(
            version="2.0.0",
            content=VersionContent(content=OPENAPI_SPEC_V2, content_type="application/json"),
        ),
    )
    print(f". Created version: {version.version}")

    print("\n Retrieving v2.0.0 OpenAPI specification...")
    v2_endpoints = summarize(fetch_spec(client, group_id, artifact_id, "2.0.0"))

    print("\n Version Comparison:")
    new_endpoints = [e for e in v2_endpoints if e not in v1_endpoints]
    print(f". v1.0.0 had {len(v1_endpoints)} endpoint(s)")
    print(f". v2.0.0 has {len(v2_endpoints)} endpoint(s)")
    if new_endpoints:
        print(f". New endpoints in v2.0.0: {', '.join(new_endpoints)}")

    print("\n All versions of this OpenAPI specification:")
    print_versions(client, group_id, artifact_id)


def main() -> int:
    return run_example("OpenAPI Example", steps, group_id=GROUP_ID, artifact_id=ARTIFACT_ID)


if __name__ == "__main__":
    raise SystemExit(main())
