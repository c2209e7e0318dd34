"""
Route definitions for the book API.

Endpoints:
- POST /books            : add a book, returns its generated id
- GET  /books/{book_id}  : get one book
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from .schemas import Book, BookCreated, CreateBookRequest, ErrorResponse
from .store import BookStore

MISSING_FIELDS = "Title and author are required"
INVALID_BODY = "Invalid request body"
NOT_FOUND = "Book not found"

router = APIRouter(tags=["books"])


def get_store(request: Request) -> BookStore:
    return request.app.state.store


@router.post(
    "/books",
    status_code=201,
    response_model=BookCreated,
    responses={400: {"model": ErrorResponse}},
)
def create_book(req: CreateBookRequest, store: BookStore = Depends(get_store)) -> BookCreated:
    # Empty or missing fields never reach here: they fail request validation
    # and are answered with 400 by the handler installed in ``main``.
    return BookCreated(id=store.create(req.title, req.author))


@router.get(
    "/books/{book_id}",
    response_model=Book,
    responses={404: {"model": ErrorResponse}},
)
def get_book(book_id: str, store: BookStore = Depends(get_store)) -> Book:
    book = store.get(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return book
