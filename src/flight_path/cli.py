"""
Command line entry point for Flight Path.

Subcommands:
    reduce FILE   Print the [origin, destination] pair of an itinerary file
    serve         Run the HTTP API with uvicorn
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from src.flight_path.adapters.algorithms import (
    ChainPathReducer,
    ContractionPathReducer,
)
from src.flight_path.adapters.loaders import load_itinerary
from src.flight_path.config import Config
from src.flight_path.exceptions import FlightPathError
from src.flight_path.ports.path_reducer import PathReducer
from src.flight_path.services.itinerary_service import ItineraryService, encode_flight

logger = logging.getLogger(__name__)

REDUCERS = {
    "chain": ChainPathReducer,
    "contraction": ContractionPathReducer,
}

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def setup_logging(level: str = Config.LOG_LEVEL) -> None:
    """
    Configure the root logger to write timestamped records to stderr.

    Args:
        level: Logging level name (e.g., 'INFO', 'DEBUG').
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    formatter = logging.Formatter(log_format, datefmt=date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flightpath",
        description="Reduce an itinerary to its origin and destination",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=Config.LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    reduce_parser = subparsers.add_parser("reduce", help="Reduce an itinerary file")
    reduce_parser.add_argument("path", help="JSON or CSV itinerary file")
    reduce_parser.add_argument(
        "--algorithm",
        choices=sorted(REDUCERS),
        default="chain",
        help="Reduction algorithm (default: %(default)s)",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=Config.HOST)
    serve_parser.add_argument("--port", type=int, default=Config.PORT)

    return parser


def run_reduce(path: str, algorithm: str) -> int:
    reducer: PathReducer = REDUCERS[algorithm]()
    service = ItineraryService(reducer)
    try:
        route = service.reduce(load_itinerary(path))
    except (FlightPathError, OSError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    print(json.dumps(encode_flight(route)))
    return 0


def run_serve(host: str, port: int) -> int:
    import uvicorn

    logger.info("Listening at %s:%d", host, port)
    uvicorn.run(
        "src.fastapi.flightpath_api:app",
        host=host,
        port=port,
        timeout_graceful_shutdown=int(Config.SHUTDOWN_TIMEOUT),
        log_config=None,
    )
    logger.info("Server stopped")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        setup_logging(args.log_level)
    except ValueError as error:
        # FLIGHTPATH_LOG_LEVEL defaults bypass argparse choices
        print(f"error: {error}", file=sys.stderr)
        return 1

    if args.command == "reduce":
        return run_reduce(args.path, args.algorithm)
    return run_serve(args.host, args.port)


if __name__ == "__main__":
    sys.exit(main())
