"""
Itinerary file loader.

Reads an itinerary from disk. JSON files use the same wire format as the
HTTP API; CSV files carry departure_airport/arrival_airport columns and
are validated against ItinerarySchema.
"""

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd
import pandera as pa

from src.flight_path.exceptions import InvalidPayloadError
from src.flight_path.schemas.flight import Flight, ItineraryDataFrame, ItinerarySchema
from src.flight_path.services.itinerary_service import decode_flights

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".csv")


def load_itinerary(path: Union[str, Path]) -> List[Flight]:
    """
    Load flights from a JSON or CSV itinerary file.

    Args:
        path: File path; the suffix selects the format.

    Returns:
        Flights in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidPayloadError: If the format is unsupported or the content
            does not describe flights.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        flights = decode_flights(path.read_bytes())
    elif suffix == ".csv":
        flights = _load_csv(path)
    else:
        raise InvalidPayloadError(
            f"Unsupported itinerary format '{suffix or path.name}', "
            f"expected one of: {', '.join(SUPPORTED_SUFFIXES)}"
        )

    logger.info("Loaded %d flights from %s", len(flights), path)
    return flights


def _load_csv(path: Path) -> List[Flight]:
    # keep_default_na=False keeps codes such as "NAN" as plain strings
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as error:
        raise InvalidPayloadError(f"{path.name}: file is empty") from error

    try:
        validated: ItineraryDataFrame = ItinerarySchema.validate(df)
    except pa.errors.SchemaError as error:
        raise InvalidPayloadError(f"{path.name}: {error}") from error

    return [
        Flight(departure, arrival)
        for departure, arrival in zip(
            validated["departure_airport"], validated["arrival_airport"]
        )
    ]
