"""
In-memory book store.

A ``BookStore`` is created by ``create_app`` and lives on
``app.state.store`` for as long as the application does; nothing is
persisted. FastAPI runs plain ``def`` handlers on a threadpool, so the
mapping is guarded by a lock. Books are only ever added and read.
"""

from __future__ import annotations

import threading
import uuid
from typing import Dict, Optional

from .schemas import Book


class BookStore:
    def __init__(self) -> None:
        self._books: Dict[str, Book] = {}
        self._lock = threading.Lock()

    def create(self, title: str, author: str) -> str:
        """Store a new book and return its freshly generated identifier."""
        book_id = str(uuid.uuid4())
        with self._lock:
            self._books[book_id] = Book(title=title, author=author)
        return book_id

    def get(self, book_id: str) -> Optional[Book]:
        with self._lock:
            return self._books.get(book_id)

    def __contains__(self, book_id: object) -> bool:
        with self._lock:
            return book_id in self._books

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)
