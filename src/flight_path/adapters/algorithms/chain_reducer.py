"""
Chain Path Reducer - primary itinerary reduction algorithm.

Orders the flights into the walk from origin to destination using a
departure-airport lookup, then reads the endpoints off the ordered walk.
Runs in O(N) time and space.
"""

import logging
from typing import Dict, List, Sequence

from src.flight_path.exceptions import EmptyItineraryError, MalformedItineraryError
from src.flight_path.ports.path_reducer import PathReducer
from src.flight_path.schemas.flight import Flight

logger = logging.getLogger(__name__)


class ChainPathReducer(PathReducer):
    """
    Reduce an itinerary by walking it from its origin.

    Given [A->B, B->C, C->D] in any order:
    - B and C appear both as departure and arrival
    - A never appears as an arrival (origin)
    - D never appears as a departure (destination)

    Shape violations met along the way (branches, cycles, gaps) raise
    MalformedItineraryError. Detection is best effort, not a full
    validation of the itinerary.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "chain"

    def reduce(self, flights: Sequence[Flight]) -> Flight:
        """
        Summarise an itinerary as a single origin->destination flight.

        Args:
            flights: Flight segments in arbitrary order.

        Returns:
            New Flight from the itinerary origin to its destination.

        Raises:
            EmptyItineraryError: If flights is empty.
            MalformedItineraryError: If the flights do not chain into
                a single simple path.
        """
        count = len(flights)
        if count == 0:
            raise EmptyItineraryError()
        if count == 1:
            only = flights[0]
            return Flight(only.departure_airport, only.arrival_airport)
        if count == 2:
            return self._reduce_pair(flights[0], flights[1])

        ordered = self.order(flights)
        return Flight(ordered[0].departure_airport, ordered[-1].arrival_airport)

    def order(self, flights: Sequence[Flight]) -> List[Flight]:
        """
        Arrange flights into travel order.

        Returns a new list; the input sequence is left untouched.

        Raises:
            EmptyItineraryError: If flights is empty.
            MalformedItineraryError: If the flights do not chain into
                a single simple path.
        """
        if not flights:
            raise EmptyItineraryError()

        # Departure airport -> the flight leaving it
        has_outgoing: Dict[str, Flight] = {}
        for flight in flights:
            if flight.departure_airport in has_outgoing:
                raise MalformedItineraryError(
                    f"more than one flight departs {flight.departure_airport}",
                    flights,
                )
            has_outgoing[flight.departure_airport] = flight

        arrivals = {flight.arrival_airport for flight in flights}
        origins = [f for f in flights if f.departure_airport not in arrivals]
        if len(origins) != 1:
            raise MalformedItineraryError(
                f"expected exactly one origin, found {len(origins)}", flights
            )

        ordered = [origins[0]]
        while len(ordered) < len(flights):
            following = has_outgoing.get(ordered[-1].arrival_airport)
            if following is None:
                raise MalformedItineraryError(
                    f"no flight continues from {ordered[-1].arrival_airport}",
                    flights,
                )
            ordered.append(following)

        # A walk that could keep going has revisited a flight
        if ordered[-1].arrival_airport in has_outgoing:
            raise MalformedItineraryError(
                f"itinerary loops back through {ordered[-1].arrival_airport}",
                flights,
            )

        logger.debug("Ordered %d flights: %s", len(ordered), ordered)
        return ordered

    @staticmethod
    def _reduce_pair(first: Flight, second: Flight) -> Flight:
        forward = first.arrival_airport == second.departure_airport
        backward = second.arrival_airport == first.departure_airport
        if forward and backward:
            raise MalformedItineraryError(
                f"{first} and {second} form a cycle", (first, second)
            )
        if forward:
            return Flight(first.departure_airport, second.arrival_airport)
        if backward:
            return Flight(second.departure_airport, first.arrival_airport)
        raise MalformedItineraryError(
            f"{first} and {second} do not connect", (first, second)
        )
