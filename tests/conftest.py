"""Pytest configuration and fixtures."""

import os
import pytest
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport

from config import Config
from golinks.service import LinkService
from golinks.storage.json_file import JSONFileLinkStore
from golinks.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def data_file(tmp_path) -> str:
    """Path of a links file whose parent directory does not exist yet."""
    return os.path.join(str(tmp_path), "data", "links.json")


@pytest.fixture
async def store(data_file, logger) -> JSONFileLinkStore:
    """Create a loaded, empty store."""
    store = JSONFileLinkStore(file_path=data_file, logger=logger)
    await store.load()
    return store


@pytest.fixture
async def service(store, logger) -> LinkService:
    """Create service instance."""
    return LinkService(store=store, logger=logger)


@pytest.fixture
def config(data_file) -> Config:
    return Config(data_file=data_file)


@pytest.fixture
async def app(service, config):
    """Create test FastAPI app."""
    return create_app(
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_links():
    """Sample shortcuts and destinations for testing."""
    return {
        "gh": "https://github.com",
        "docs": "https://docs.python.org/3/",
        "mail": "http://mail.example.com",
    }
