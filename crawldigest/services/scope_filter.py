import logging
from typing import Optional
from urllib.parse import urlparse

from crawldigest.domain.robots_rules import RobotsRuleSet

logger = logging.getLogger(__name__)

_DEFAULT_PORTS = {"http": 80, "https": 443}


def origin_of(url: str) -> Optional[str]:
    """Return `scheme://host[:port]` (lower-cased, default port omitted) or None if `url` is not absolute."""
    try:
        parsed = urlparse(url)
        host = parsed.hostname
        port = parsed.port
    except ValueError:
        return None
    if not parsed.scheme or not host:
        return None
    scheme = parsed.scheme.lower()
    origin = f"{scheme}://{host.lower()}"
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        origin = f"{origin}:{port}"
    return origin


class ScopeFilter:
    """Decides whether a candidate URL may be fetched."""

    def is_in_scope(self, url: str, base_origin: str) -> bool:
        origin = origin_of(url)
        if origin is None:
            logger.debug("Out of scope (not absolute): %s", url)
            return False
        return origin == base_origin

    def is_allowed(self, url: str, rules: Optional[RobotsRuleSet]) -> bool:
        if rules is None:
            return True
        try:
            path = urlparse(url).path or "/"
        except ValueError:
            # Fail open: one malformed link must not stop the crawl.
            return True
        return rules.is_path_allowed(path)
