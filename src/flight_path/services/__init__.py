"""
Domain services for Flight Path.
"""

from src.flight_path.services.itinerary_service import (
    ItineraryService,
    decode_flights,
    encode_flight,
)

__all__ = [
    "ItineraryService",
    "decode_flights",
    "encode_flight",
]
