"""FastAPI route handlers."""

import asyncio
from urllib.parse import quote

from fastapi import Request, Response
from fastapi.responses import JSONResponse, RedirectResponse

from core.envelope import HEALTH_PAYLOAD, error_envelope
from core.exceptions import ClientDisconnected, MalformedPrefixError, UpstreamError
from core.protocols import RequestLogger
from core.request_types import InboundRequest

CLIENT_CLOSED_REQUEST = 499


async def handle_root() -> RedirectResponse:
    """Redirect / to /health."""
    return RedirectResponse(url="/health", status_code=302)


async def handle_health() -> JSONResponse:
    """Report liveness without touching the upstream."""
    return JSONResponse(content=HEALTH_PAYLOAD, status_code=200)


async def handle_forward(request: Request, logger: RequestLogger) -> Response:
    """Handle {prefix}/* by forwarding to TMDB."""
    path = _raw_path(request)
    inbound = InboundRequest(
        method=request.method,
        path=path,
        query=request.query_params.multi_items(),
    )

    forwarding_service = request.app.state.forwarding_service
    try:
        call = forwarding_service.prepare(inbound)
    except MalformedPrefixError as e:
        logger.log_error(400, "Bad Request", str(e))
        return JSONResponse(content=error_envelope(str(e)), status_code=400)

    upstream = request.app.state.upstream_client
    try:
        response = await _cancel_on_disconnect(request, upstream.fetch(call))
    except ClientDisconnected:
        logger.log_error(CLIENT_CLOSED_REQUEST, "Client Closed Request", f"Client disconnected: {path}")
        return Response(status_code=CLIENT_CLOSED_REQUEST)
    except UpstreamError as e:
        logger.log_error(e.status_code, e.status_text, e.message)
        return JSONResponse(
            content=error_envelope(e.body),
            status_code=e.status_code or 500,
        )

    logger.log_response(path, response.status_code)
    return Response(
        content=response.content,
        status_code=response.status_code,
        media_type=response.headers.get("content-type", "application/json"),
    )


async def _cancel_on_disconnect(request: Request, coro):
    """Await coro, cancelling it if the client disconnects first."""
    fetch = asyncio.ensure_future(coro)
    watcher = asyncio.ensure_future(_wait_for_disconnect(request))
    watcher.add_done_callback(_retrieve_exception)
    try:
        done, _ = await asyncio.wait({fetch, watcher}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        watcher.cancel()
        if not fetch.done():
            fetch.cancel()

    if fetch not in done:
        raise ClientDisconnected()
    return fetch.result()


async def _wait_for_disconnect(request: Request) -> None:
    while True:
        message = await request.receive()
        if message["type"] == "http.disconnect":
            return


def _retrieve_exception(task: asyncio.Task) -> None:
    # A failed receive channel is treated as a disconnect
    if not task.cancelled():
        task.exception()


def _raw_path(request: Request) -> str:
    """Return the still percent-encoded request path."""
    raw_path = request.scope.get("raw_path")
    if raw_path is None:
        return quote(request.url.path, safe="/")
    return raw_path.decode("latin-1").split("?", 1)[0]
