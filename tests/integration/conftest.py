"""Pytest configuration and fixtures for API integration tests."""
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.dependencies import reset_dependencies
from api.main import app
from core.infrastructure.event_bus import get_event_bus


@pytest.fixture
def test_client() -> Generator[TestClient, None, None]:
    """FastAPI test client over fresh in-memory adapters."""
    reset_dependencies()
    get_event_bus().clear()

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
    reset_dependencies()
    get_event_bus().clear()
