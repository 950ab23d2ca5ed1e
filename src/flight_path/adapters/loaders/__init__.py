"""
Itinerary loaders for file input.
"""

from src.flight_path.adapters.loaders.itinerary_file import load_itinerary

__all__ = ["load_itinerary"]
