"""
Itinerary Service - Domain orchestrator for path reduction.

Coordinates the interaction between:
- the wire decoder (JSON payload -> Flight list)
- the PathReducer (algorithm adapter)
"""

from __future__ import annotations

import logging
import time
from typing import Annotated, List, Optional, Sequence, Tuple

from pydantic import StringConstraints, TypeAdapter, ValidationError

from src.flight_path.adapters.algorithms.chain_reducer import ChainPathReducer
from src.flight_path.exceptions import InvalidPayloadError
from src.flight_path.ports.path_reducer import PathReducer
from src.flight_path.schemas.flight import Flight

logger = logging.getLogger(__name__)

AirportCode = Annotated[str, StringConstraints(strict=True, min_length=1)]

# [[from, to], ...] with exactly two non-empty strings per element
_PAYLOAD_ADAPTER: TypeAdapter[List[Tuple[AirportCode, AirportCode]]] = TypeAdapter(
    List[Tuple[AirportCode, AirportCode]]
)


def decode_flights(payload: bytes | str) -> List[Flight]:
    """
    Decode a JSON itinerary payload into flights.

    Args:
        payload: JSON array of [departure, arrival] string pairs.

    Returns:
        Flights in payload order.

    Raises:
        InvalidPayloadError: On malformed JSON, a non-array top level, or
            an element that is not exactly two non-empty strings.
    """
    try:
        pairs = _PAYLOAD_ADAPTER.validate_json(payload)
    except ValidationError as error:
        first = error.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "payload"
        raise InvalidPayloadError(f"{location}: {first['msg']}") from error

    return [Flight(departure, arrival) for departure, arrival in pairs]


def encode_flight(flight: Flight) -> List[str]:
    """Wire representation of a reduced flight: [origin, destination]."""
    return list(flight.as_pair())


class ItineraryService:
    """
    Domain service for reducing itineraries.

    Orchestrates the reduction process:
    1. Decodes the raw payload (when given one)
    2. Delegates reduction to the algorithm adapter
    3. Logs performance metrics

    This service is stateless and thread-safe.

    Attributes:
        _reducer: Algorithm adapter for path reduction.
    """

    def __init__(self, reducer: Optional[PathReducer] = None) -> None:
        """
        Initialize the itinerary service.

        Args:
            reducer: Algorithm adapter. Defaults to ChainPathReducer.
        """
        self._reducer = reducer or ChainPathReducer()

    @property
    def reducer(self) -> PathReducer:
        """Algorithm adapter in use."""
        return self._reducer

    def reduce(self, flights: Sequence[Flight]) -> Flight:
        """
        Summarise flights as a single origin->destination flight.

        Args:
            flights: Flight segments in arbitrary order.

        Returns:
            Flight from the itinerary origin to its destination.

        Raises:
            EmptyItineraryError: If flights is empty.
            MalformedItineraryError: If the flights do not form a path.
        """
        start_time = time.perf_counter()
        route = self._reducer.reduce(flights)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.debug(
            "Reduced %d flights to %s with %s in %.3fms",
            len(flights),
            route,
            self._reducer.name,
            elapsed_ms,
        )
        return route

    def reduce_payload(self, payload: bytes | str) -> Tuple[List[Flight], Flight]:
        """
        Decode a JSON payload and reduce it.

        Returns:
            Tuple of (decoded flights, reduced flight).

        Raises:
            InvalidPayloadError: If the payload cannot be decoded.
            EmptyItineraryError: If the payload holds no flights.
            MalformedItineraryError: If the flights do not form a path.
        """
        flights = decode_flights(payload)
        return flights, self.reduce(flights)
