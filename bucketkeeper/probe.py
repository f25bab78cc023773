"""
GitBucket server detection.

GitBucket has no identifier of its own in repository URLs, so a URI is
claimed when the server answers the side-effect-free plugins route of its
API.
"""

from urllib.parse import urlsplit, urlunsplit

import httpx

from bucketkeeper.config import API_PATH, PLUGINS_PATH
from bucketkeeper.logging import get_logger

logger = get_logger("probe")


def probe_url(uri: str) -> str:
    """
    Derive the plugins endpoint URL for a repository or API URI.

    An API URI (containing "api/v3") is probed relative to itself. For a
    repository URI the trailing git/owner/repo segments are removed first.
    """
    if "api/v3" in uri:
        return f"{uri.rstrip('/')}/{PLUGINS_PATH}"

    parts = urlsplit(uri)
    segments = [s for s in parts.path.split("/") if s]
    root = segments[:-3]
    path = "/" + "".join(f"{s}/" for s in root)

    return urlunsplit((parts.scheme, parts.netloc, f"{path}{API_PATH.lstrip('/')}{PLUGINS_PATH}", "", ""))


class GitBucketProbe:
    """Decides whether a URI belongs to a GitBucket server."""

    DEFAULT_TIMEOUT = 5.0

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            timeout: Upper bound in seconds on the probe request
            transport: Optional httpx transport, used to intercept requests in tests
        """
        self.timeout = timeout
        self._transport = transport

    def can_claim(self, uri: str | None) -> bool:
        """Return True if the plugins endpoint answers with a success status. Never raises."""
        if not uri:
            return False

        try:
            url = probe_url(uri)
            if urlsplit(url).scheme not in ("http", "https"):
                return False

            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(url, headers={"Accept": "application/json"})
            return response.is_success
        except Exception as e:
            logger.debug("No valid GitBucket repo during repo check: %s", e)
            return False
