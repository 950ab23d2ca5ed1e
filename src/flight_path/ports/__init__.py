"""
Port interfaces for Flight Path.

Ports define the abstract interfaces that the service layer uses,
following the Ports and Adapters (Hexagonal) architecture pattern.
"""

from src.flight_path.ports.path_reducer import PathReducer

__all__ = ["PathReducer"]
