"""
Tests for the library book service.
"""

from __future__ import annotations

import uuid

from fastapi.testclient import TestClient

from schemashelf.library.main import create_app
from schemashelf.library.schemas import Book
from schemashelf.library.store import BookStore


class TestCreateBook:
    """POST /books."""

    def test_created_book_can_be_read_back(self, api: TestClient) -> None:
        response = api.post("/books", json={"title": "Dune", "author": "Herbert"})
        assert response.status_code == 201
        book_id = response.json()["id"]
        assert book_id

        fetched = api.get(f"/books/{book_id}")
        assert fetched.status_code == 200
        assert fetched.json() == {"title": "Dune", "author": "Herbert"}

    def test_each_book_gets_a_fresh_id(self, api: TestClient, store: BookStore) -> None:
        ids = {
            api.post("/books", json={"title": "Dune", "author": "Herbert"}).json()["id"]
            for _ in range(3)
        }
        assert len(ids) == 3
        assert len(store) == 3

    def test_missing_author_rejected(self, api: TestClient, store: BookStore) -> None:
        response = api.post("/books", json={"title": ""})
        assert response.status_code == 400
        assert response.json() == {"error": "Title and author are required"}
        assert len(store) == 0

    def test_empty_fields_rejected(self, api: TestClient, store: BookStore) -> None:
        for body in (
            {"title": "", "author": "Herbert"},
            {"title": "Dune", "author": ""},
            {"title": "Dune", "author": 42},
            {},
        ):
            response = api.post("/books", json=body)
            assert response.status_code == 400, body
            assert "error" in response.json()
        assert len(store) == 0

    def test_invalid_json_rejected(self, api: TestClient, store: BookStore) -> None:
        response = api.post(
            "/books", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}
        assert len(store) == 0


class TestBookStore:
    def test_create_then_get(self, store: BookStore) -> None:
        book_id = store.create("Dune", "Herbert")
        assert book_id in store
        assert store.get(book_id) == Book(title="Dune", author="Herbert")
        assert store.get("unused") is None
        assert len(store) == 1


class TestGetBook:
    """GET /books/{id}."""

    def test_unknown_id_is_not_found(self, api: TestClient) -> None:
        response = api.get(f"/books/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json() == {"error": "Book not found"}

    def test_reads_from_injected_store(self, store: BookStore, api: TestClient) -> None:
        book_id = store.create("Emma", "Austen")
        assert api.get(f"/books/{book_id}").json() == {"title": "Emma", "author": "Austen"}

    def test_apps_do_not_share_state(self) -> None:
        first = TestClient(create_app())
        second = TestClient(create_app())
        book_id = first.post("/books", json={"title": "Dune", "author": "Herbert"}).json()["id"]
        assert first.get(f"/books/{book_id}").status_code == 200
        assert second.get(f"/books/{book_id}").status_code == 404


class TestErrors:
    def test_unknown_route_uses_error_payload(self, api: TestClient) -> None:
        response = api.get("/authors")
        assert response.status_code == 404
        assert "error" in response.json()

    def test_unhandled_fault_is_500(self) -> None:
        class BrokenStore(BookStore):
            def get(self, book_id):
                raise RuntimeError("disk on fire")

        client = TestClient(create_app(store=BrokenStore()), raise_server_exceptions=False)
        response = client.get("/books/anything")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestDocs:
    """GET /api-docs."""

    def test_docs_page_is_swagger_ui(self, api: TestClient) -> None:
        response = api.get("/api-docs")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "swagger-ui" in response.text
        assert "/api-docs/openapi.json" in response.text

    def test_docs_serve_packaged_description(self, api: TestClient) -> None:
        document = api.get("/api-docs/openapi.json").json()
        assert document["info"]["title"] == "Library API"
        assert set(document["paths"]) == {"/books", "/books/{id}"}

    def test_docs_serve_injected_description(self) -> None:
        spec = {"openapi": "3.0.3", "info": {"title": "Custom", "version": "9"}, "paths": {}}
        client = TestClient(create_app(docs_spec=spec))
        assert client.get("/api-docs/openapi.json").json() == spec
        assert "Custom" in client.get("/api-docs").text
