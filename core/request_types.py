"""Shared request data types."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class InboundRequest:
    """The parts of a client request the forwarder reads."""

    method: str
    path: str
    query: list[tuple[str, str]] = field(default_factory=list)


@dataclass(frozen=True)
class OutboundCall:
    """Prepared data for the upstream TMDB request."""

    upstream_path: str
    url: str
    params: list[tuple[str, str]]
    headers: dict[str, str]
