"""
Artifact search walkthrough: unfiltered, by name with sorting, paginated,
by artifact type, and by group.
"""

from __future__ import annotations

from ..registry.client import RegistryClient
from ..registry.config import RegistrySettings
from ..registry.schemas import SearchFilter, SortOrder
from .runner import run_example


def steps(client: RegistryClient, settings: RegistrySettings) -> None:
    print(". Searching for all artifacts...")
    everything = client.search_artifacts()
    print(f". Found {everything.count} artifact(s)")
    if everything.artifacts:
        print("\nArtifacts:")
        for index, artifact in enumerate(everything.artifacts, start=1):
            print(f"  {index}. {artifact.group_id}/{artifact.artifact_id}")
            print(f"     Type: {artifact.artifact_type}")
            if artifact.name:
                print(f"     Name: {artifact.name}")
            if artifact.description:
                print(f"     Description: {artifact.description}")
            print(f"     Modified: {artifact.modified_on}")
            print()

    print("\n. Searching for artifacts with name containing 'user'...")
    users = client.search_artifacts(
        SearchFilter(name="user", order=SortOrder.ASC, orderby="name")
    )
    print(f". Found {users.count} matching artifact(s)")
    for index, artifact in enumerate(users.artifacts, start=1):
        print(f"  {index}. {artifact.group_id}/{artifact.artifact_id}")
        print(f"     Name: {artifact.name}")

    print("\n. Searching with pagination (limit: 5)...")
    page = client.search_artifacts(limit=5, offset=0, order=SortOrder.DESC, orderby="createdOn")
    print(f". Showing {len(page.artifacts)} of {page.count} total artifact(s)")
    for index, artifact in enumerate(page.artifacts, start=1):
        print(f"  {index}. {artifact.group_id}/{artifact.artifact_id}")
        print(f"     Created: {artifact.created_on}")

    print("\n. Searching for AVRO artifacts...")
    avro = client.search_artifacts(artifact_type="AVRO")
    print(f". Found {avro.count} AVRO artifact(s)")

    print(f"\n. Searching for artifacts in group '{settings.group_id}'...")
    in_group = client.search_artifacts(group_id=settings.group_id)
    print(f". Found {in_group.count} artifact(s) in this group")
    for index, artifact in enumerate(in_group.artifacts, start=1):
        print(f"  {index}. {artifact.artifact_id} ({artifact.artifact_type})")


def main() -> int:
    return run_example("Search Example", steps, show_coordinates=False)


if __name__ == "__main__":
    raise SystemExit(main())
