"""Header construction for upstream requests."""


class HeaderBuilder:
    """Build upstream headers for TMDB."""

    def build_tmdb_headers(self, token: str | None) -> dict[str, str]:
        """Always ask for JSON; add the bearer credential only when configured."""
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers
