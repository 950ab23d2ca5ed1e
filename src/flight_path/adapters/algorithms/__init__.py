"""
Algorithm adapters for itinerary reduction.
"""

from src.flight_path.adapters.algorithms.chain_reducer import ChainPathReducer
from src.flight_path.adapters.algorithms.contraction_reducer import (
    ContractionPathReducer,
)

__all__ = [
    "ChainPathReducer",
    "ContractionPathReducer",
]
