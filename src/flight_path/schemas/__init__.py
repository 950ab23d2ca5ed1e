"""
Schema definitions for Flight Path.

The Flight dataclass is the in-process contract; ItinerarySchema
validates tabular itineraries at the file boundary.
"""

from .flight import Flight, ItineraryDataFrame, ItinerarySchema

__all__ = [
    "Flight",
    "ItineraryDataFrame",
    "ItinerarySchema",
]
