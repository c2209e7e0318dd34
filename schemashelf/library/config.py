"""
Configuration for the library service.

``LibrarySettings.from_environment()`` reads:

- ``LIBRARY_HOST`` / ``LIBRARY_PORT``: where uvicorn listens
  (``127.0.0.1:3000``).
- ``LIBRARY_DOCS_SOURCE``: ``file`` (default) to load the packaged
  ``openapi.yaml`` or the file named by ``LIBRARY_DOCS_PATH``;
  ``registry`` to fetch the description from the schema registry.
- ``LIBRARY_DOCS_VERSION``: registry version to fetch (``1.0.0``).
- ``REGISTRY_URL``, ``GROUP_ID``, ``ARTIFACT_ID``, ``REGISTRY_TIMEOUT``:
  the registry coordinates, defaulting to ``group001/library-api``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field
from typing_extensions import Literal

from ..registry.config import RegistrySettings

DOCS_GROUP_ID = "group001"
DOCS_ARTIFACT_ID = "library-api"
DOCS_VERSION = "1.0.0"
DEFAULT_DOCS_PATH = Path(__file__).resolve().with_name("openapi.yaml")

DocsSource = Literal["file", "registry"]


class LibrarySettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=0, le=65535)
    docs_source: DocsSource = "file"
    docs_path: Path = DEFAULT_DOCS_PATH
    docs_version: str = DOCS_VERSION
    registry: RegistrySettings = Field(
        default_factory=lambda: RegistrySettings(
            group_id=DOCS_GROUP_ID, artifact_id=DOCS_ARTIFACT_ID
        )
    )

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> "LibrarySettings":
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("LIBRARY_HOST") or "127.0.0.1",
            port=env.get("LIBRARY_PORT") or 3000,
            docs_source=(env.get("LIBRARY_DOCS_SOURCE") or "file").lower(),
            docs_path=env.get("LIBRARY_DOCS_PATH") or DEFAULT_DOCS_PATH,
            docs_version=env.get("LIBRARY_DOCS_VERSION") or DOCS_VERSION,
            registry=RegistrySettings.from_environment(
                env, group_id=DOCS_GROUP_ID, artifact_id=DOCS_ARTIFACT_ID
            ),
        )
