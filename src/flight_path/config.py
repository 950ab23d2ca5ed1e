"""
Configuration module for the Flight Path service.

This module loads environment variables (optionally from a .env file)
and provides centralized settings for the HTTP boundary and logging.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


class Config:
    """
    Application configuration class.

    Attributes:
        HOST: Address the HTTP server binds to.
        PORT: Port the HTTP server listens on.
        MAX_BODY_BYTES: Maximum accepted request body size.
        READ_TIMEOUT: Seconds allowed for each request message to arrive.
        WRITE_TIMEOUT: Seconds allowed for each response message to be sent.
        SHUTDOWN_TIMEOUT: Seconds in-flight requests get to finish on shutdown.
        LOG_LEVEL: Root logger level name.

    Raises:
        ValueError: If a numeric variable cannot be parsed.
    """

    HOST: str = os.getenv("FLIGHTPATH_HOST", "0.0.0.0")
    PORT: int = _env_int("FLIGHTPATH_PORT", 8080)
    MAX_BODY_BYTES: int = _env_int("FLIGHTPATH_MAX_BODY_BYTES", 4096)
    READ_TIMEOUT: float = _env_float("FLIGHTPATH_READ_TIMEOUT", 5.0)
    WRITE_TIMEOUT: float = _env_float("FLIGHTPATH_WRITE_TIMEOUT", 10.0)
    SHUTDOWN_TIMEOUT: float = _env_float("FLIGHTPATH_SHUTDOWN_TIMEOUT", 60.0)
    LOG_LEVEL: str = os.getenv("FLIGHTPATH_LOG_LEVEL", "INFO").upper()
