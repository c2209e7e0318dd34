# schemashelf/library/main.py
"""
Book library microservice.

Run with ``schemashelf-library`` (see ``main``) or
``uvicorn schemashelf.library.main:create_app --factory``. The API
description shown at ``/api-docs`` is loaded once, at startup; see
``docs.load_docs_spec`` for where it comes from.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..registry.errors import RegistryError
from . import docs
from .config import LibrarySettings
from .router import INVALID_BODY, MISSING_FIELDS, router as books_router
from .store import BookStore


logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        return _error(400, INVALID_BODY)
    return _error(400, MISSING_FIELDS)


def _on_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = _error(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def _on_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal server error")


def create_app(
    store: Optional[BookStore] = None,
    docs_spec: Optional[Dict[str, Any]] = None,
    settings: Optional[LibrarySettings] = None,
) -> FastAPI:
    """Build an independent application instance.

    Parameters
    ----------
    store : Optional[BookStore]
        Store to serve; a new empty one when omitted.
    docs_spec : Optional[Dict[str, Any]]
        Pre-loaded API description. When omitted it is loaded according
        to ``settings`` (the packaged ``openapi.yaml`` by default).
    settings : Optional[LibrarySettings]
        Service configuration; defaults when omitted.
    """
    settings = settings or LibrarySettings()
    if docs_spec is None:
        docs_spec = docs.load_docs_spec(settings)

    info = docs_spec.get("info") or {}
    app = FastAPI(
        title=str(info.get("title", "Library API")),
        description=str(info.get("description", "")),
        version=str(info.get("version", "1.0.0")),
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = store if store is not None else BookStore()
    app.state.docs_spec = docs_spec

    app.add_exception_handler(RequestValidationError, _on_validation_error)
    app.add_exception_handler(StarletteHTTPException, _on_http_error)
    app.add_exception_handler(Exception, _on_unhandled_error)

    app.include_router(books_router)
    app.include_router(docs.router)
    return app


def main() -> int:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = LibrarySettings.from_environment()
    try:
        app = create_app(settings=settings)
    except (RegistryError, OSError, ValueError) as exc:
        logger.error("Failed to load API description: %s", exc)
        return 1

    logger.info("Server running on http://%s:%s", settings.host, settings.port)
    logger.info(
        "API documentation available at http://%s:%s%s",
        settings.host,
        settings.port,
        docs.DOCS_URL,
    )
    uvicorn.run(app, host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
