"""
Fixtures for itinerary service tests.
"""

from unittest.mock import MagicMock

import pytest

from src.flight_path.ports.path_reducer import PathReducer
from src.flight_path.schemas.flight import Flight


@pytest.fixture
def reference_payload() -> bytes:
    """The four-flight SFO->EWR itinerary as a JSON body."""
    return b'[["IND", "EWR"], ["SFO", "ATL"], ["GSO", "IND"], ["ATL", "GSO"]]'


@pytest.fixture
def mock_reducer() -> MagicMock:
    """A PathReducer double that always answers SFO->EWR."""
    reducer = MagicMock(spec=PathReducer)
    reducer.name = "mock"
    reducer.reduce.return_value = Flight("SFO", "EWR")
    return reducer
