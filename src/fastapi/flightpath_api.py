"""
Flight Path HTTP API.

Exposes itinerary reduction as POST /calculate. The request body is a
JSON array of [from, to] pairs; the response is [origin, destination].
The boundary owns the body size limit, read/write timeouts and the
request log; reduction itself is delegated to ItineraryService.
"""

import asyncio
import logging
from typing import List, NoReturn, Optional

from fastapi import FastAPI, HTTPException, Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from src.flight_path.config import Config
from src.flight_path.exceptions import (
    EmptyItineraryError,
    InvalidPayloadError,
    MalformedItineraryError,
    PayloadTooLargeError,
)
from src.flight_path.services.itinerary_service import ItineraryService, encode_flight

logger = logging.getLogger(__name__)


class TimeoutMiddleware:
    """
    Bound every ASGI receive and send call of an HTTP request.

    A receive that exceeds read_timeout raises TimeoutError inside the
    handler reading the body; a send that exceeds write_timeout aborts
    the response and the server drops the connection.
    """

    def __init__(self, app: ASGIApp, read_timeout: float, write_timeout: float) -> None:
        self.app = app
        self.read_timeout = read_timeout
        self.write_timeout = write_timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def timed_receive() -> Message:
            return await asyncio.wait_for(receive(), self.read_timeout)

        async def timed_send(message: Message) -> None:
            await asyncio.wait_for(send(message), self.write_timeout)

        await self.app(scope, timed_receive, timed_send)


service = ItineraryService()

app = FastAPI(title="Flight Path API")

app.add_middleware(
    TimeoutMiddleware,
    read_timeout=Config.READ_TIMEOUT,
    write_timeout=Config.WRITE_TIMEOUT,
)


def _log_request(request: Request, status: int, *details: object) -> None:
    client = f"{request.client.host}:{request.client.port}" if request.client else "-"
    logger.info(
        "%s %s %d %s",
        client,
        request.url.path,
        status,
        " ".join(str(detail) for detail in details),
    )


def _fail(
    request: Request,
    status: int,
    error: object,
    payload: Optional[bytes] = None,
) -> NoReturn:
    if payload is None:
        _log_request(request, status, error)
    else:
        _log_request(request, status, error, f"({payload!r})")
    raise HTTPException(status_code=status, detail=str(error))


async def read_body(request: Request, limit: int) -> bytes:
    """
    Read the request body, refusing anything larger than limit bytes.

    Raises:
        PayloadTooLargeError: If the declared or streamed size exceeds limit.
        TimeoutError: If the client stalls past the read timeout.
    """
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(int(declared), limit)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise PayloadTooLargeError(len(body), limit)
    return bytes(body)


# --- API Endpoints ---


@app.post("/calculate", response_model=List[str])
async def calculate(request: Request) -> List[str]:
    """
    Reduce an itinerary to its overall origin and destination.

    Status codes:
    - 200: [origin, destination]
    - 400: malformed JSON, wrong shape, empty codes or no flights
    - 408: request body not received in time
    - 413: request body over the size limit
    - 422: flights do not form a single path
    """
    try:
        payload = await read_body(request, Config.MAX_BODY_BYTES)
    except PayloadTooLargeError as error:
        _fail(request, 413, error)
    except asyncio.TimeoutError:
        _fail(request, 408, "request body read timed out")

    try:
        flights, route = service.reduce_payload(payload)
    except (InvalidPayloadError, EmptyItineraryError) as error:
        _fail(request, 400, error, payload)
    except MalformedItineraryError as error:
        _fail(request, 422, error, payload)

    _log_request(request, 200, [str(flight) for flight in flights], "->", route)
    return encode_flight(route)


@app.api_route(
    "/calculate",
    methods=["GET", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False,
    response_model=None,
)
async def calculate_method_not_allowed(request: Request) -> NoReturn:
    """Answer 405 for anything but POST, logging the method."""
    _log_request(request, 405, request.method)
    raise HTTPException(
        status_code=405, detail="Method Not Allowed", headers={"Allow": "POST"}
    )
