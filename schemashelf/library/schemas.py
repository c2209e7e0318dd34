"""
Pydantic schema definitions for the library service.

``CreateBookRequest`` is the body accepted by ``POST /books``; both
fields are required and may not be empty. ``Book`` is what
``GET /books/{book_id}`` returns. The identifier is not part of the
book itself: it is generated by the store and handed back once, in
``BookCreated``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateBookRequest(BaseModel):
    title: str = Field(min_length=1)
    author: str = Field(min_length=1)


class Book(BaseModel):
    title: str
    author: str


class BookCreated(BaseModel):
    id: str


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response produced by the service."""

    error: str
