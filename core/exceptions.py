"""Custom exception hierarchy for the TMDB proxy."""

from typing import Any


class ProxyError(Exception):
    """Base exception for all proxy errors."""


class ConfigurationError(ProxyError):
    """Raised when configuration is missing or invalid."""


class MalformedPrefixError(ProxyError):
    """Raised when an inbound path does not start with the forwarding prefix.

    Attributes:
        path: The inbound request path
        prefix: The configured forwarding prefix
    """

    def __init__(self, path: str, prefix: str) -> None:
        super().__init__(f"Request path must start with {prefix}/")
        self.path = path
        self.prefix = prefix


class UpstreamError(ProxyError):
    """Raised when the TMDB call fails.

    Attributes:
        message: Error message
        status_code: HTTP status code from upstream (None when no response)
        status_text: HTTP reason phrase from upstream (None when no response)
        body: Decoded upstream response body, if any
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        status_text: str | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.status_text = status_text
        self.body = body


class UpstreamHTTPError(UpstreamError):
    """Raised when TMDB responds with a non-2xx status."""


class UpstreamTimeoutError(UpstreamError):
    """Raised when the TMDB request times out."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UpstreamConnectionError(UpstreamError):
    """Raised when unable to connect to TMDB."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ClientDisconnected(ProxyError):
    """Raised when the inbound client goes away before TMDB answers."""
