"""Shared fixtures: an in-process registry and isolated library apps."""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from schemashelf.library.main import create_app
from schemashelf.library.store import BookStore
from schemashelf.registry.client import RegistryClient

from tests.fake_registry import FakeRegistry


@pytest.fixture(autouse=True)
def no_proxy(monkeypatch: pytest.MonkeyPatch) -> None:
    # urllib honours *_proxy variables; the fake registry is always local.
    for name in ("http_proxy", "HTTP_PROXY", "https_proxy", "HTTPS_PROXY", "all_proxy", "ALL_PROXY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry() -> Iterator[FakeRegistry]:
    fake = FakeRegistry().start()
    try:
        yield fake
    finally:
        fake.stop()


@pytest.fixture
def client(registry: FakeRegistry) -> RegistryClient:
    return RegistryClient(registry.url, timeout=5)


@pytest.fixture
def registry_env(registry: FakeRegistry, monkeypatch: pytest.MonkeyPatch) -> FakeRegistry:
    """Point the example scripts at the fake registry."""
    monkeypatch.setenv("REGISTRY_URL", registry.url)
    monkeypatch.delenv("GROUP_ID", raising=False)
    monkeypatch.delenv("ARTIFACT_ID", raising=False)
    for name in ("LIBRARY_DOCS_SOURCE", "LIBRARY_DOCS_PATH", "LIBRARY_DOCS_VERSION", "LIBRARY_PORT"):
        monkeypatch.delenv(name, raising=False)
    return registry


@pytest.fixture
def store() -> BookStore:
    return BookStore()


@pytest.fixture
def api(store: BookStore) -> Iterator[TestClient]:
    with TestClient(create_app(store=store)) as test_client:
        yield test_client
