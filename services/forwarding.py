"""Forwarding orchestration for TMDB requests."""

from core.config import Config
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from core.request_types import InboundRequest, OutboundCall
from core.router import PathResolver


class ForwardingService:
    """Prepare inbound requests for forwarding to TMDB."""

    def __init__(
        self,
        config: Config,
        logger: RequestLogger,
        resolver: PathResolver | None = None,
        header_builder: HeaderBuilder | None = None,
    ) -> None:
        self._config = config
        self._logger = logger
        self._resolver = resolver or PathResolver(config.forward.prefix)
        self._headers = header_builder or HeaderBuilder()

    def prepare(self, inbound: InboundRequest) -> OutboundCall:
        """Resolve the upstream URL, copy the query and build headers."""
        upstream_path = self._resolver.resolve(inbound.path)
        url = f"{self._config.tmdb.base_url.rstrip('/')}/{upstream_path}"
        if not self._config.is_production:
            self._logger.log_upstream(url)
        return OutboundCall(
            upstream_path=upstream_path,
            url=url,
            params=list(inbound.query),
            headers=self._headers.build_tmdb_headers(self._config.tmdb.token),
        )
