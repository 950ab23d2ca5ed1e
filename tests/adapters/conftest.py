"""
Fixtures for path reducer tests.

Provides the reference itineraries and a generator of random
single-path itineraries for permutation and oracle tests.
"""

import random
from typing import List, Tuple

import pytest

from src.flight_path.adapters.algorithms import (
    ChainPathReducer,
    ContractionPathReducer,
)
from src.flight_path.schemas.flight import Flight

AIRPORTS = [
    "ATL", "LAX", "ORD", "DFW", "DEN", "JFK", "SFO", "SEA", "LAS", "MCO",
    "CLT", "EWR", "PHX", "MIA", "IAH", "BOS", "MSP", "FLL", "DTW", "PHL",
    "LHR", "CDG", "FRA", "MAD", "BCN", "AMS", "FCO", "MXP", "DUB", "CPH",
    "WAW", "OSL", "HEL", "VIE", "ZRH", "IND", "GSO", "EDDF", "kjfk", "x",
]

# (input pairs, expected (origin, destination))
REFERENCE_ITINERARIES = [
    ([("SFO", "EWR")], ("SFO", "EWR")),
    ([("ATL", "EWR"), ("SFO", "ATL")], ("SFO", "EWR")),
    (
        [("IND", "EWR"), ("SFO", "ATL"), ("GSO", "IND"), ("ATL", "GSO")],
        ("SFO", "EWR"),
    ),
    ([("SFO", "ATL"), ("ATL", "EWR")], ("SFO", "EWR")),
    (
        [("SFO", "ATL"), ("IND", "EWR"), ("GSO", "IND"), ("ATL", "GSO")],
        ("SFO", "EWR"),
    ),
]


def to_flights(pairs: List[Tuple[str, str]]) -> List[Flight]:
    """Build Flight objects from (departure, arrival) pairs."""
    return [Flight(departure, arrival) for departure, arrival in pairs]


def make_itinerary(num_flights: int, rng: random.Random) -> Tuple[List[Flight], Flight]:
    """
    Generate a shuffled single-path itinerary.

    Returns:
        Tuple of (shuffled flights, expected reduced flight).
    """
    if num_flights < len(AIRPORTS):
        stops = rng.sample(AIRPORTS, num_flights + 1)
    else:
        stops = [f"AP{index:05d}" for index in range(num_flights + 1)]
        rng.shuffle(stops)

    flights = [Flight(a, b) for a, b in zip(stops, stops[1:])]
    rng.shuffle(flights)
    return flights, Flight(stops[0], stops[-1])


@pytest.fixture
def chain_reducer() -> ChainPathReducer:
    return ChainPathReducer()


@pytest.fixture
def contraction_reducer() -> ContractionPathReducer:
    return ContractionPathReducer()


@pytest.fixture(params=["chain", "contraction"])
def reducer(request):
    """Each reducer implementation in turn."""
    if request.param == "chain":
        return ChainPathReducer()
    return ContractionPathReducer()
