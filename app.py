"""FastAPI application factory."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from api.handlers import handle_forward, handle_health, handle_root
from api.middleware import install_middleware
from core.config import Config
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from core.router import PathResolver
from services.forwarding import ForwardingService
from services.upstream import UpstreamClient


def create_app(
    config: Config,
    logger: RequestLogger,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    resolver = PathResolver(config.forward.prefix)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        limits = httpx.Limits(
            max_connections=config.limits.max_connections,
            max_keepalive_connections=config.limits.max_keepalive_connections,
        )
        tmdb_client = httpx.AsyncClient(
            timeout=config.forward.timeout,
            limits=limits,
            follow_redirects=True,
            transport=transport,
        )
        app.state.upstream_client = UpstreamClient(tmdb_client, timeout=config.forward.timeout)
        app.state.forwarding_service = ForwardingService(
            config=config,
            logger=logger,
            resolver=resolver,
            header_builder=HeaderBuilder(),
        )
        try:
            yield
        finally:
            await tmdb_client.aclose()

    app = FastAPI(title="TMDB Proxy", version="0.1.0", lifespan=lifespan)
    install_middleware(app)

    @app.get("/")
    async def root():
        return await handle_root()

    @app.get("/health")
    async def health():
        return await handle_health()

    @app.get(resolver.prefix + "/{upstream_path:path}")
    async def proxy_tmdb(request: Request):
        return await handle_forward(request, logger)

    return app
