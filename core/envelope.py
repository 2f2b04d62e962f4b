"""Response payloads produced by the proxy itself."""

from typing import Any

GENERIC_FAILURE = "Failed to fetch data from TMDB API"

HEALTH_PAYLOAD: dict[str, Any] = {
    "statusCode": 200,
    "status": "OK",
    "message": "Proxy server is running and healthy.",
}


def error_envelope(error: Any = None) -> dict[str, Any]:
    """Wrap an upstream error body, falling back to the generic message."""
    if error is None or error == "":
        error = GENERIC_FAILURE
    return {"success": False, "error": error}
