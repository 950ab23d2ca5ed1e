"""
Flight schemas for itinerary reduction.

Defines the Flight value type passed to path reducers and the Pandera
contract for tabular (CSV) itineraries.
"""

from dataclasses import dataclass

import pandera as pa
from pandera.typing import DataFrame, Series


@dataclass(frozen=True)
class Flight:
    """
    Immutable representation of a single directed flight segment.

    Airport identifiers are opaque tokens: no length, alphabet or case
    convention is assumed.

    Attributes:
        departure_airport: Airport the segment leaves from.
        arrival_airport: Airport the segment lands at.
    """

    departure_airport: str
    arrival_airport: str

    def __post_init__(self) -> None:
        """Validate airport identifiers after initialization."""
        if not self.departure_airport:
            raise ValueError("departure_airport cannot be empty")
        if not self.arrival_airport:
            raise ValueError("arrival_airport cannot be empty")

    def __str__(self) -> str:
        return f"{self.departure_airport}->{self.arrival_airport}"

    def as_pair(self) -> tuple[str, str]:
        """Wire representation: (departure, arrival)."""
        return (self.departure_airport, self.arrival_airport)


class ItinerarySchema(pa.DataFrameModel):
    """
    Contract for a tabular itinerary.

    Each row is one flight segment. Rows are unordered; extra columns
    are allowed and ignored by the reducer.
    """

    departure_airport: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Departure airport identifier (e.g., 'SFO')",
    )
    arrival_airport: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Arrival airport identifier",
    )

    class Config:
        strict = False
        coerce = True
        name = "ItinerarySchema"
        description = "Unordered flight segments of a single itinerary"


ItineraryDataFrame = DataFrame[ItinerarySchema]
