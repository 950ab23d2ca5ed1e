"""
Fixtures for FastAPI endpoint tests.
"""

import pytest
from fastapi.testclient import TestClient

from src.fastapi.flightpath_api import app


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def client() -> TestClient:
    """HTTP client bound to the Flight Path app."""
    return TestClient(app)
