"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from artifact_store.application.services.store_service import Store
from artifact_store.infrastructure.config import Settings
from artifact_store.interfaces.http.rest import create_app
from helpers import READER_TOKEN, WRITER_TOKEN, bearer, make_project


@pytest.fixture
def store_root(tmp_path) -> Path:
    """Store root with project `acme`: readers tok-r, writers tok-w."""
    root = tmp_path / "state"
    root.mkdir()
    make_project(root, "acme", readers=[READER_TOKEN], writers=[WRITER_TOKEN])
    return root


@pytest.fixture
def store(store_root) -> Store:
    return Store(store_root)


@pytest.fixture
def reader(store):
    return store.project_reader("acme", bearer(READER_TOKEN))


@pytest.fixture
def writer(store):
    return store.project_writer("acme", bearer(WRITER_TOKEN))


@pytest.fixture
def settings(store_root) -> Settings:
    return Settings(state_dir=store_root, log_level="DEBUG")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    """Synchronous HTTP client; redirects are not followed."""
    with TestClient(app, follow_redirects=False) as c:
        yield c


@pytest.fixture
async def async_client(app) -> AsyncClient:
    """Get test HTTP client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
