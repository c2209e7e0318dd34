"""
API documentation for the library service.

The OpenAPI description is loaded exactly once, when the application is
created, either from a YAML file shipped with the package or from the
schema registry (where the ``publish-docs`` runner puts it). The
resulting document is served as JSON at ``/api-docs/openapi.json`` and
rendered with Swagger UI at ``/api-docs``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from fastapi import APIRouter, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse

from ..registry.client import RegistryClient
from .config import LibrarySettings


logger = logging.getLogger(__name__)

DOCS_URL = "/api-docs"
DOCS_JSON_URL = "/api-docs/openapi.json"


def parse_docs(text: str, source: str) -> Dict[str, Any]:
    """Parse an OpenAPI description written in YAML or JSON."""
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Could not parse API description from {source}: {exc}") from exc
    if not isinstance(document, dict):
        raise ValueError(f"API description from {source} is not a mapping")
    return document


def load_docs_file(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    return parse_docs(path.read_text(encoding="utf-8"), str(path))


def load_docs_from_registry(
    client: RegistryClient, group_id: str, artifact_id: str, version: str
) -> Dict[str, Any]:
    content = client.get_version_content(group_id, artifact_id, version)
    return parse_docs(content, f"{group_id}/{artifact_id}@{version}")


def load_docs_spec(
    settings: LibrarySettings, client: Optional[RegistryClient] = None
) -> Dict[str, Any]:
    """Load the API description named by ``settings``.

    Registry failures propagate as ``RegistryError``; a missing or
    unparsable file propagates as ``OSError`` / ``ValueError``.
    """
    if settings.docs_source == "registry":
        reg = settings.registry
        client = client or RegistryClient.from_settings(reg)
        document = load_docs_from_registry(
            client, reg.group_id, reg.artifact_id, settings.docs_version
        )
        logger.info(
            "Loaded API description from registry %s/%s (version: %s)",
            reg.group_id,
            reg.artifact_id,
            settings.docs_version,
        )
        return document
    document = load_docs_file(settings.docs_path)
    logger.info("Loaded API description from %s", settings.docs_path)
    return document


router = APIRouter(include_in_schema=False)


@router.get(DOCS_URL, response_class=HTMLResponse)
def swagger_ui(request: Request) -> HTMLResponse:
    info = request.app.state.docs_spec.get("info") or {}
    return get_swagger_ui_html(
        openapi_url=DOCS_JSON_URL,
        title=f"{info.get('title', 'API')} - Swagger UI",
    )


@router.get(DOCS_JSON_URL)
def openapi_document(request: Request) -> JSONResponse:
    return JSONResponse(request.app.state.docs_spec)
