"""Pytest fixtures for server module testing."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from server.main import _registry, app


@pytest.fixture(autouse=True)
def default_registry() -> Iterator[None]:
    yield
    _registry.reset_to_defaults()


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
