"""
Shared scaffolding for the example scripts.

Every example follows the same shape: read the registry coordinates
from the environment, print a header, run a fixed sequence of client
calls that print as they go, and report success. Any ``RegistryError``
stops the run; it is logged, printed to stderr, and turned into exit
status 1.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Callable

from pydantic import ValidationError as PydanticValidationError

from ..registry.client import RegistryClient
from ..registry.config import DEFAULT_ARTIFACT_ID, DEFAULT_GROUP_ID, RegistrySettings
from ..registry.errors import RegistryError


logger = logging.getLogger(__name__)

Steps = Callable[[RegistryClient, RegistrySettings], None]


def configure_logging() -> None:
    # WARNING by default so log lines do not interleave with the walkthrough.
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_example(
    title: str,
    steps: Steps,
    group_id: str = DEFAULT_GROUP_ID,
    artifact_id: str = DEFAULT_ARTIFACT_ID,
    show_coordinates: bool = True,
) -> int:
    """Run ``steps`` against the configured registry and return an exit code."""
    configure_logging()
    try:
        settings = RegistrySettings.from_environment(group_id=group_id, artifact_id=artifact_id)
    except PydanticValidationError as exc:
        logger.error("Invalid registry configuration: %s", exc)
        print(f"\n Error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    print(f"=== Schema Registry - {title} ===\n")
    print(f"Registry: {settings.registry_url}")
    if show_coordinates:
        print(f"Group ID: {settings.group_id}")
        print(f"Artifact ID: {settings.artifact_id}")
    print()

    try:
        steps(RegistryClient.from_settings(settings), settings)
    except RegistryError as exc:
        logger.error("%s failed: %s", title, exc)
        print(f"\n Error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print("\n Example completed successfully!")
    return 0


def print_versions(client: RegistryClient, group_id: str, artifact_id: str) -> None:
    versions = client.list_versions(group_id, artifact_id)
    print(f". Found {len(versions)} version(s):")
    for index, version in enumerate(versions, start=1):
        print(f"  {index}. Version {version.version} ({version.state})")
        print(f"     Created: {version.created_on}")
