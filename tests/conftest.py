"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from graphnum.api.main import app
from graphnum.host.exports import HostExports


@pytest.fixture
def exports() -> HostExports:
    """A fresh host function table with the numeric functions registered."""
    return HostExports()


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create a test client for the API."""
    # Ensure dependency overrides are cleared after test
    yield TestClient(app)
    app.dependency_overrides.clear()
