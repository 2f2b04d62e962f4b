"""Shared protocol definitions."""

from typing import Protocol


class RequestLogger(Protocol):
    """Protocol for request logging (Dashboard, ConsoleLogger)."""

    def log_upstream(self, url: str) -> None: ...
    def log_response(self, path: str, status: int) -> None: ...
    def log_error(
        self,
        status: int | None,
        status_text: str | None,
        message: str,
    ) -> None: ...
