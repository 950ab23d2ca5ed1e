"""
Path Reducer port interface.

Defines the abstract contract for itinerary reduction algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from src.flight_path.schemas.flight import Flight


class PathReducer(ABC):
    """
    Abstract interface for path reduction algorithms.

    A reducer receives the unordered flights of one itinerary and
    returns a fresh Flight from the overall origin to the overall
    destination. Reducers are pure: they never mutate the input
    sequence and keep no state between calls.

    Implementations:
    - ChainPathReducer: O(N) walk over a departure lookup
    - ContractionPathReducer: worklist contraction, used as a test oracle
    """

    @abstractmethod
    def reduce(self, flights: Sequence[Flight]) -> Flight:
        """
        Summarise an itinerary as a single flight.

        Args:
            flights: Flight segments in arbitrary order.

        Returns:
            Flight from the itinerary origin to its destination.

        Raises:
            EmptyItineraryError: If flights is empty.
            MalformedItineraryError: If the flights are detected not to
                form a single simple path.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
