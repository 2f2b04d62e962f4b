"""HTTP client wrapper for the TMDB API."""

import json
from typing import Any

import httpx

from core.request_types import OutboundCall
from core.exceptions import (
    UpstreamConnectionError,
    UpstreamHTTPError,
    UpstreamTimeoutError,
)


class UpstreamClient:
    """Issue a single GET per forwarded request."""

    def __init__(self, client: httpx.AsyncClient, timeout: float = 10.0) -> None:
        self._client = client
        self._timeout = timeout

    async def fetch(self, call: OutboundCall) -> httpx.Response:
        """Send the call and return the 2xx response.

        Raises:
            UpstreamHTTPError: TMDB answered with a non-2xx status.
            UpstreamTimeoutError: No answer within the timeout.
            UpstreamConnectionError: The request could not be sent.
        """
        try:
            response = await self._client.get(
                call.url,
                params=call.params or None,
                headers=call.headers,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(str(e) or "Upstream timeout") from e
        except httpx.RequestError as e:
            raise UpstreamConnectionError(str(e) or "Upstream connection error") from e

        if not response.is_success:
            raise UpstreamHTTPError(
                f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
                status_text=response.reason_phrase,
                body=decode_body(response),
            )
        return response


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to text."""
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text
