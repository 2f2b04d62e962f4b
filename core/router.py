"""Path resolution - maps inbound proxy paths to TMDB API paths."""

from core.exceptions import MalformedPrefixError


class PathResolver:
    """Strip the forwarding prefix from inbound paths."""

    def __init__(self, prefix: str = "/tmdb"):
        self.prefix = "/" + prefix.strip("/") if prefix.strip("/") else ""

    def resolve(self, path: str) -> str:
        """Return the upstream path for an inbound path.

        Only a single leading occurrence of the prefix is removed, and only
        when it ends on a segment boundary. The result never starts with "/".

        Raises:
            MalformedPrefixError: The path does not start with the prefix.
        """
        if not self._has_prefix(path):
            raise MalformedPrefixError(path, self.prefix)
        return path[len(self.prefix):].lstrip("/")

    def _has_prefix(self, path: str) -> bool:
        if not path.startswith(self.prefix):
            return False
        rest = path[len(self.prefix):]
        return rest == "" or rest.startswith("/")
