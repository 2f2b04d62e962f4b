"""
Shared fixtures for TMDB proxy tests.

Provides a recording request logger, configuration builders and an app
factory wired to an in-memory httpx transport instead of the real TMDB API.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from app import create_app
from core.config import Config, ForwardSettings, ServerSettings, TmdbSettings


class RecordingLogger:
    """RequestLogger that keeps every event in memory."""

    def __init__(self):
        self.upstream: list[str] = []
        self.responses: list[tuple[str, int]] = []
        self.errors: list[tuple[int | None, str | None, str]] = []

    def log_upstream(self, url):
        self.upstream.append(url)

    def log_response(self, path, status):
        self.responses.append((path, status))

    def log_error(self, status, status_text, message):
        self.errors.append((status, status_text, message))


def make_config(token="test-token", environment="development", **forward) -> Config:
    return Config(
        server=ServerSettings(environment=environment),
        tmdb=TmdbSettings(base_url="https://api.themoviedb.org/3", token=token),
        forward=ForwardSettings(**forward),
    )


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def captured():
    """Requests seen by the fake upstream."""
    return []


@pytest.fixture
def make_client(logger, captured):
    """Build a TestClient whose upstream answers with `handler`."""
    clients = []

    def _make(handler, config=None):
        def _transport_handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return handler(request)

        app = create_app(
            config or make_config(),
            logger,
            transport=httpx.MockTransport(_transport_handler),
        )
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
