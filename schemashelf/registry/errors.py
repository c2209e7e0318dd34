"""
Error taxonomy for the registry client.

Every failure surfaced by ``RegistryClient`` is a ``RegistryError``.
Callers that only care whether the call succeeded can catch the base
class; callers that need to tell "the server said no" apart from "the
server could not be reached" can catch ``TransportError`` separately.
"""

from __future__ import annotations

from typing import Optional


class RegistryError(Exception):
    """Base class for all registry client failures.

    ``status`` holds the HTTP status code reported by the server, or
    ``None`` when no response was received. ``detail`` holds the
    server's problem-details message when one was provided.
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.detail = detail

    def __str__(self) -> str:
        if self.status is not None:
            return f"{self.message} (HTTP {self.status})"
        return self.message


class ValidationError(RegistryError):
    """The request was malformed, either locally or according to the server."""


class NotFoundError(RegistryError):
    """The referenced group, artifact or version does not exist."""


class ConflictError(RegistryError):
    """An artifact or version with the same identifier already exists."""


class TransportError(RegistryError):
    """The server could not be reached (refused, unresolvable, timed out)."""


class ServerError(RegistryError):
    """The server failed or answered with something the client cannot use."""


def error_for_status(status: int, message: str, detail: Optional[str] = None) -> RegistryError:
    """Return the taxonomy error matching an HTTP error status."""
    if status in (400, 422):
        return ValidationError(message, status=status, detail=detail)
    if status == 404:
        return NotFoundError(message, status=status, detail=detail)
    if status == 409:
        return ConflictError(message, status=status, detail=detail)
    return ServerError(message, status=status, detail=detail)
