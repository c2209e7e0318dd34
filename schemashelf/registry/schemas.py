"""
Pydantic schema definitions for the registry client.

These models mirror the JSON documents exchanged with the registry's
``/apis/registry/v3/`` API. Field names are snake_case in Python and
camelCase on the wire; ``model_dump(by_alias=True)`` produces the wire
form and responses are validated with ``model_validate``. Unknown
fields returned by the server are ignored so that newer registry
releases do not break the client.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing_extensions import Literal


class _RegistryModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class _RequestModel(_RegistryModel):
    # Caller input: an unknown or misspelt key is an error, not a no-op.
    model_config = ConfigDict(extra="forbid")


class SortOrder(str, Enum):
    """Sort direction accepted by the search endpoints."""

    ASC = "asc"
    DESC = "desc"


ArtifactSortBy = Literal[
    "groupId", "artifactId", "createdOn", "modifiedOn", "artifactType", "name"
]


class SystemInfo(_RegistryModel):
    name: str
    description: Optional[str] = None
    version: Optional[str] = None
    built_on: Optional[str] = None


class Group(_RegistryModel):
    group_id: str
    description: Optional[str] = None
    created_on: Optional[str] = None
    modified_on: Optional[str] = None
    owner: Optional[str] = None


class GroupSearchResults(_RegistryModel):
    count: int
    groups: List[Group] = Field(default_factory=list)


class ArtifactMetaData(_RegistryModel):
    """Descriptor of an artifact, as returned by metadata and search calls.

    Search results omit some fields (``owner``, ``labels``) so everything
    beyond the composite key and the type is optional.
    """

    group_id: Optional[str] = None
    artifact_id: str
    artifact_type: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    owner: Optional[str] = None
    created_on: Optional[str] = None
    modified_on: Optional[str] = None
    modified_by: Optional[str] = None
    labels: Dict[str, str] = Field(default_factory=dict)


class VersionMetaData(_RegistryModel):
    version: str
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    global_id: Optional[int] = None
    content_id: Optional[int] = None
    state: Optional[str] = None
    created_on: Optional[str] = None
    artifact_type: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class VersionSearchResults(_RegistryModel):
    count: int
    versions: List[VersionMetaData] = Field(default_factory=list)


class VersionContent(_RequestModel):
    """Content of a version: the document itself plus its media type."""

    content: str
    content_type: str = "application/json"


class CreateVersion(_RequestModel):
    """Payload for a new version. ``version`` may be omitted to let the
    server assign the next label."""

    content: VersionContent
    version: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class CreateArtifact(_RequestModel):
    artifact_id: str = Field(min_length=1)
    artifact_type: str = Field(min_length=1)
    name: Optional[str] = None
    description: Optional[str] = None
    first_version: CreateVersion


class CreateArtifactResponse(_RegistryModel):
    artifact: ArtifactMetaData
    version: Optional[VersionMetaData] = None


class SearchFilter(_RequestModel):
    """Options for ``RegistryClient.search_artifacts``.

    ``name`` and ``description`` are substring matches, ``artifact_type``
    and ``group_id`` exact matches. Results are sorted by ``orderby`` in
    ``order`` direction before being sliced with ``offset``/``limit``.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    artifact_type: Optional[str] = None
    group_id: Optional[str] = None
    labels: List[str] = Field(default_factory=list)
    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)
    order: Optional[SortOrder] = None
    orderby: Optional[ArtifactSortBy] = None

    @field_validator("order", mode="before")
    @classmethod
    def _fold_order(cls, value: Any) -> Any:
        # "Asc", "ASC" and "asc" all name the same direction.
        if isinstance(value, str):
            return value.lower()
        return value

    def to_query(self) -> List[tuple]:
        """Return the filter as ordered query parameters."""
        params: List[tuple] = []
        for key, value in self.to_wire().items():
            if key == "labels":
                params.extend(("labels", label) for label in value)
            else:
                params.append((key, value))
        return params


class ArtifactSearchResults(_RegistryModel):
    count: int
    artifacts: List[ArtifactMetaData] = Field(default_factory=list)
