"""
Library service package.

A small FastAPI application that adds books to, and reads books from,
an in-memory ``BookStore``, and serves its own API documentation.
"""

from .main import create_app  # noqa: F401
from .store import BookStore  # noqa: F401
