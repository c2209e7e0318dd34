"""
HTTP client for a schema registry speaking the ``/apis/registry/v3/`` API.

``RegistryClient`` exposes the handful of operations the example
runners and the library service need: group listing, artifact and
version creation, metadata and content retrieval, and artifact search.
Requests are made one at a time with ``urllib.request`` and each
response is validated into the models from ``schemas``.

Failures are never swallowed. Anything the server rejects is raised as
the matching ``errors`` subclass (404 -> ``NotFoundError`` and so on);
anything that prevents a response from arriving at all is raised as
``TransportError``. A success response whose body cannot be parsed into
the expected shape is raised as ``ServerError``.
"""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .config import DEFAULT_TIMEOUT, RegistrySettings
from .errors import ServerError, TransportError, ValidationError, error_for_status
from .schemas import (
    ArtifactMetaData,
    ArtifactSearchResults,
    CreateArtifact,
    CreateArtifactResponse,
    CreateVersion,
    Group,
    GroupSearchResults,
    SearchFilter,
    SystemInfo,
    VersionMetaData,
    VersionSearchResults,
)


logger = logging.getLogger(__name__)

USER_AGENT = "schemashelf-registry-client/1.0"

# Symbolic version expression accepted by callers and the registry
# expression it stands for.
LATEST = "latest"
_ALIASES = {LATEST: "branch=latest"}

ModelT = TypeVar("ModelT", bound=BaseModel)
Query = Iterable[Tuple[str, Any]]


def _segment(value: str) -> str:
    return urllib.parse.quote(value, safe="")


def _coerce(model: Type[ModelT], value: Union[ModelT, Mapping[str, Any]]) -> ModelT:
    """Validate caller input into ``model``, raising our ``ValidationError``."""
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ValidationError(f"Invalid {model.__name__}: {problems}") from exc


def _require(name: str, value: Optional[str]) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{name} is required")
    return value


class RegistryClient:
    """Synchronous client bound to one registry endpoint.

    Parameters
    ----------
    base_url : str
        Root of the v3 API, e.g. ``http://localhost:8080/apis/registry/v3/``.
    timeout : float
        Seconds to wait for each request before raising ``TransportError``.
    page_size : int
        Page size used when ``list_versions`` walks through every version.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        page_size: int = 100,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = page_size

    @classmethod
    def from_settings(cls, settings: RegistrySettings) -> "RegistryClient":
        return cls(settings.registry_url, timeout=settings.timeout)

    def __repr__(self) -> str:
        return f"RegistryClient({self.base_url!r})"

    # ------------------------------------------------------------------
    # Transport

    def _url(self, path: str, params: Optional[Query] = None) -> str:
        url = f"{self.base_url}/{path.lstrip('/')}"
        if params:
            query = urllib.parse.urlencode([(k, v) for k, v in params if v is not None])
            if query:
                url = f"{url}?{query}"
        return url

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Query] = None,
        body: Optional[Any] = None,
        accept: str = "application/json",
    ) -> bytes:
        """Send one request and return the raw response body."""
        url = self._url(path, params)
        headers = {"Accept": accept, "User-Agent": USER_AGENT}
        data = None
        if body is not None:
            data = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = "application/json"
        request = urllib.request.Request(url, data=data, headers=headers, method=method)
        logger.debug("%s %s", method, url)
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                return response.read()
        except urllib.error.HTTPError as exc:
            raise self._status_error(method, url, exc) from exc
        except urllib.error.URLError as exc:
            logger.warning("Registry unreachable: %s %s: %s", method, url, exc.reason)
            raise TransportError(f"Could not reach registry at {url}: {exc.reason}") from exc
        except (OSError, http.client.HTTPException) as exc:
            # Timeouts and dropped connections raised while reading the body.
            logger.warning("Registry request failed: %s %s: %s", method, url, exc)
            raise TransportError(f"Request to {url} failed: {exc}") from exc

    def _status_error(self, method: str, url: str, exc: urllib.error.HTTPError):
        """Turn an HTTP error response into a taxonomy error.

        The registry reports problems as problem-details JSON
        (``{"title": ..., "detail": ..., "status": ...}``); when present
        its text is used for the message.
        """
        detail = None
        try:
            payload = json.loads(exc.read().decode("utf-8") or "null")
        except (ValueError, OSError):
            payload = None
        finally:
            exc.close()
        if isinstance(payload, dict):
            detail = payload.get("detail") or payload.get("message")
            title = payload.get("title") or detail
        else:
            title = None
        message = title or f"{method} {url} failed: {exc.reason}"
        logger.warning("Registry returned %s for %s %s: %s", exc.code, method, url, message)
        return error_for_status(exc.code, message, detail=detail)

    def _json(
        self,
        method: str,
        path: str,
        params: Optional[Query] = None,
        body: Optional[Any] = None,
    ) -> Any:
        raw = self._request(method, path, params=params, body=body)
        try:
            return json.loads(raw.decode("utf-8"))
        except ValueError as exc:
            raise ServerError(f"Malformed JSON from {method} {path}") from exc

    def _model(
        self,
        model: Type[ModelT],
        method: str,
        path: str,
        params: Optional[Query] = None,
        body: Optional[Any] = None,
    ) -> ModelT:
        payload = self._json(method, path, params=params, body=body)
        try:
            return model.model_validate(payload)
        except PydanticValidationError as exc:
            raise ServerError(
                f"Unexpected {model.__name__} shape from {method} {path}: "
                f"{exc.error_count()} problem(s)"
            ) from exc

    @staticmethod
    def _artifact_path(group_id: str, artifact_id: str) -> str:
        group_id = _require("group_id", group_id)
        artifact_id = _require("artifact_id", artifact_id)
        return f"groups/{_segment(group_id)}/artifacts/{_segment(artifact_id)}"

    # ------------------------------------------------------------------
    # System and groups

    def get_system_info(self) -> SystemInfo:
        return self._model(SystemInfo, "GET", "system/info")

    def list_groups(self) -> List[Group]:
        """Return every group known to the registry, in server order."""
        groups: List[Group] = []
        offset = 0
        while True:
            page = self._model(
                GroupSearchResults,
                "GET",
                "groups",
                params=[("offset", offset), ("limit", self.page_size)],
            )
            groups.extend(page.groups)
            offset += len(page.groups)
            if not page.groups or offset >= page.count:
                return groups

    # ------------------------------------------------------------------
    # Artifacts and versions

    def create_artifact(
        self,
        group_id: str,
        spec: Union[CreateArtifact, Mapping[str, Any]],
    ) -> CreateArtifactResponse:
        """Create an artifact together with its first version.

        Raises ``ValidationError`` before contacting the server when a
        required field is missing, and ``ConflictError`` when the
        artifact already exists in the group.
        """
        group_id = _require("group_id", group_id)
        spec = _coerce(CreateArtifact, spec)
        logger.info("Creating artifact %s/%s", group_id, spec.artifact_id)
        return self._model(
            CreateArtifactResponse,
            "POST",
            f"groups/{_segment(group_id)}/artifacts",
            body=spec.to_wire(),
        )

    def get_artifact_metadata(self, group_id: str, artifact_id: str) -> ArtifactMetaData:
        return self._model(ArtifactMetaData, "GET", self._artifact_path(group_id, artifact_id))

    def create_version(
        self,
        group_id: str,
        artifact_id: str,
        version: Union[CreateVersion, Mapping[str, Any]],
    ) -> VersionMetaData:
        path = self._artifact_path(group_id, artifact_id)
        version = _coerce(CreateVersion, version)
        logger.info("Creating version %s of %s/%s", version.version, group_id, artifact_id)
        return self._model(VersionMetaData, "POST", f"{path}/versions", body=version.to_wire())

    def list_versions(self, group_id: str, artifact_id: str) -> List[VersionMetaData]:
        """Return every version of an artifact, oldest first.

        The registry pages its results, so this walks pages until the
        reported ``count`` is reached. Versions are ordered by
        ``globalId``, which the registry assigns monotonically.
        """
        path = f"{self._artifact_path(group_id, artifact_id)}/versions"
        versions: List[VersionMetaData] = []
        offset = 0
        while True:
            page = self._model(
                VersionSearchResults,
                "GET",
                path,
                params=[
                    ("offset", offset),
                    ("limit", self.page_size),
                    ("order", "asc"),
                    ("orderby", "globalId"),
                ],
            )
            versions.extend(page.versions)
            offset += len(page.versions)
            if not page.versions or offset >= page.count:
                return versions

    def get_version_content(
        self,
        group_id: str,
        artifact_id: str,
        version_expression: str = LATEST,
    ) -> str:
        """Return the content of one version as text.

        ``version_expression`` is either a literal version label or the
        alias ``"latest"``.
        """
        expression = _require("version_expression", version_expression)
        expression = _ALIASES.get(expression, expression)
        path = (
            f"{self._artifact_path(group_id, artifact_id)}/versions/"
            f"{urllib.parse.quote(expression, safe='=')}/content"
        )
        raw = self._request("GET", path, accept="*/*")
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ServerError(f"Content of {path} is not UTF-8 text") from exc

    # ------------------------------------------------------------------
    # Search

    def search_artifacts(
        self,
        filter: Optional[Union[SearchFilter, Mapping[str, Any]]] = None,
        **options: Any,
    ) -> ArtifactSearchResults:
        """Search artifacts across all groups.

        Options may be passed as a ``SearchFilter``, a mapping, keyword
        arguments, or a mix (keywords win). ``count`` in the result is the
        total number of matches; ``artifacts`` is the requested page.
        """
        # Normalise both sides to field names before overlaying, so a camelCase
        # mapping and snake_case keywords name the same option once.
        base = _coerce(SearchFilter, filter if filter is not None else {})
        overlay = _coerce(SearchFilter, options)
        search = base.model_copy(update=overlay.model_dump(exclude_unset=True))
        return self._model(
            ArtifactSearchResults, "GET", "search/artifacts", params=search.to_query()
        )
