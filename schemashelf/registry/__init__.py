"""
Registry client package.

Provides ``RegistryClient``, a typed wrapper around a schema registry's
v3 REST API, together with the request/response models it speaks and
the error taxonomy it raises. Nothing here stores state of its own; the
registry server owns artifacts, versions and groups.
"""

from .client import LATEST, RegistryClient  # noqa: F401
from .config import RegistrySettings  # noqa: F401
from .errors import (  # noqa: F401
    ConflictError,
    NotFoundError,
    RegistryError,
    ServerError,
    TransportError,
    ValidationError,
)
from .schemas import (  # noqa: F401
    ArtifactMetaData,
    ArtifactSearchResults,
    CreateArtifact,
    CreateArtifactResponse,
    CreateVersion,
    Group,
    SearchFilter,
    SortOrder,
    SystemInfo,
    VersionContent,
    VersionMetaData,
)
