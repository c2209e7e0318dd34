"""
Environment configuration for registry consumers.

Values are read from environment variables once, validated by pydantic,
and passed explicitly to whoever needs them. Each recognised variable
has a default so that the example runners work out of the box against
a registry started locally on port 8080.

=================== ============================================== ==========
Variable            Default                                        Meaning
=================== ============================================== ==========
``REGISTRY_URL``    ``http://localhost:8080/apis/registry/v3/``    endpoint
``GROUP_ID``        runner specific (``example-group``)            group
``ARTIFACT_ID``     runner specific (``example-user-schema``)      artifact
``REGISTRY_TIMEOUT`` ``10``                                        seconds
=================== ============================================== ==========
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_REGISTRY_URL = "http://localhost:8080/apis/registry/v3/"
DEFAULT_GROUP_ID = "example-group"
DEFAULT_ARTIFACT_ID = "example-user-schema"
DEFAULT_TIMEOUT = 10.0


class RegistrySettings(BaseModel):
    registry_url: str = DEFAULT_REGISTRY_URL
    group_id: str = DEFAULT_GROUP_ID
    artifact_id: str = DEFAULT_ARTIFACT_ID
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @field_validator("registry_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"registry URL must be http(s), got {value!r}")
        return value

    @classmethod
    def from_environment(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        group_id: str = DEFAULT_GROUP_ID,
        artifact_id: str = DEFAULT_ARTIFACT_ID,
    ) -> "RegistrySettings":
        """Build settings from environment variables.

        Parameters
        ----------
        environ : Optional[Mapping[str, str]]
            Mapping to read from; ``os.environ`` when omitted.
        group_id, artifact_id : str
            Defaults used when ``GROUP_ID`` / ``ARTIFACT_ID`` are unset.
            Each runner passes its own.
        """
        env = os.environ if environ is None else environ
        return cls(
            registry_url=env.get("REGISTRY_URL") or DEFAULT_REGISTRY_URL,
            group_id=env.get("GROUP_ID") or group_id,
            artifact_id=env.get("ARTIFACT_ID") or artifact_id,
            timeout=env.get("REGISTRY_TIMEOUT") or DEFAULT_TIMEOUT,
        )
