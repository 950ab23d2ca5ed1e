"""
Custom exceptions for the flight_path package.

Provides a hierarchy of exceptions for clear error handling
of itinerary decoding and path reduction.
"""

from typing import Sequence


class FlightPathError(Exception):
    """Base exception for all flight_path errors."""

    pass


class ItineraryError(FlightPathError):
    """Base exception for itineraries the reducer cannot summarise."""

    pass


class EmptyItineraryError(ItineraryError):
    """Raised when an itinerary contains no flights."""

    def __init__(self, message: str = "Itinerary contains no flights") -> None:
        super().__init__(message)


class MalformedItineraryError(ItineraryError):
    """Raised when flights do not form a single simple path."""

    def __init__(self, reason: str, flights: Sequence[object] = ()) -> None:
        self.reason = reason
        self.flights = tuple(flights)
        message = f"Malformed itinerary: {reason}"
        super().__init__(message)


class InvalidPayloadError(FlightPathError):
    """Raised when an itinerary payload cannot be decoded into flights."""

    def __init__(self, message: str = "Invalid itinerary payload") -> None:
        self.message = message
        super().__init__(message)


class PayloadTooLargeError(InvalidPayloadError):
    """Raised when a payload exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Payload of {size} bytes exceeds limit of {limit} bytes")
