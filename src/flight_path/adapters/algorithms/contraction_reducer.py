"""
Contraction Path Reducer - reference reduction algorithm.

Grows a single route outward from the first flight, splicing matching
flights onto either end and retrying the rest. O(N^2) in the worst case;
kept as an independent oracle for the chain reducer.
"""

import logging
from typing import List, Sequence, Set

from src.flight_path.exceptions import EmptyItineraryError, MalformedItineraryError
from src.flight_path.ports.path_reducer import PathReducer
from src.flight_path.schemas.flight import Flight

logger = logging.getLogger(__name__)


class ContractionPathReducer(PathReducer):
    """
    Reduce an itinerary by contracting flights into one route.

    Each pass scans the pending flights: a flight landing at the route's
    departure is prepended, a flight leaving the route's arrival is
    appended, anything else is retried on the next pass. On a valid
    path every pass splices at least one flight, so at most N passes
    are needed.

    Malformed input is ended by the stall check (a pass that splices
    nothing) or by a splice that revisits an airport. Since every pass
    that does not stall shrinks the pending list, the stall check always
    fires before the N-pass cap; the cap remains as a hard upper bound
    on the loop.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "contraction"

    def reduce(self, flights: Sequence[Flight]) -> Flight:
        """
        Summarise an itinerary as a single origin->destination flight.

        Args:
            flights: Flight segments in arbitrary order.

        Returns:
            New Flight from the itinerary origin to its destination.

        Raises:
            EmptyItineraryError: If flights is empty.
            MalformedItineraryError: If contraction stalls or the route
                revisits an airport.
        """
        if not flights:
            raise EmptyItineraryError()

        origin = flights[0].departure_airport
        destination = flights[0].arrival_airport
        visited: Set[str] = {origin, destination}
        pending: List[Flight] = list(flights[1:])
        max_passes = len(flights)
        passes = 0

        while pending:
            if passes >= max_passes:
                raise MalformedItineraryError(
                    f"contraction did not finish within {max_passes} passes",
                    flights,
                )
            passes += 1

            unmatched: List[Flight] = []
            for flight in pending:
                if flight.arrival_airport == origin:
                    origin = flight.departure_airport
                    spliced = origin
                elif flight.departure_airport == destination:
                    destination = flight.arrival_airport
                    spliced = destination
                else:
                    unmatched.append(flight)
                    continue

                if spliced in visited:
                    raise MalformedItineraryError(
                        f"route revisits {spliced}", flights
                    )
                visited.add(spliced)

            if len(unmatched) == len(pending):
                raise MalformedItineraryError(
                    f"{len(unmatched)} flights do not connect to {origin}->{destination}",
                    flights,
                )
            pending = unmatched

        logger.debug("Contracted %d flights in %d passes", len(flights), passes)
        return Flight(origin, destination)
