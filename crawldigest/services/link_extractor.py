import logging
from typing import Optional
from urllib.parse import urldefrag, urljoin, urlparse, urlunparse

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_FOLLOWABLE_SCHEMES = ("http", "https")
_DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_url(url: str) -> Optional[str]:
    """Canonical form of an absolute http(s) URL, or None for anything else.

    Drops the fragment, lower-cases scheme and host, removes the scheme's
    default port and turns an empty path into "/". Path and query keep their
    case.
    """
    try:
        defragged, _ = urldefrag(url.strip())
        parsed = urlparse(defragged)
        host = parsed.hostname
        # .port raises ValueError on junk like "http://host:abc/"
        port = parsed.port
    except ValueError:
        return None
    scheme = parsed.scheme.lower()
    if scheme not in _FOLLOWABLE_SCHEMES or not host:
        return None

    if ":" in host:
        host = f"[{host}]"
    netloc = host if port is None or port == _DEFAULT_PORTS[scheme] else f"{host}:{port}"
    userinfo, at, _ = parsed.netloc.rpartition("@")
    if at:
        netloc = f"{userinfo}@{netloc}"
    return urlunparse((scheme, netloc, parsed.path or "/", parsed.params, parsed.query, ""))


class LinkExtractor:
    """Discovers outbound links in rendered HTML.

    Relative hrefs are resolved against the URL of the page they appear on.
    Results are deduplicated, keep document order, and silently drop hrefs
    that do not resolve to an absolute http(s) URL.
    """

    def __init__(self, parser: str = "html.parser"):
        self._parser = parser

    def extract_links(self, base_url: str, html: str) -> list[str]:
        if not html:
            return []
        soup = BeautifulSoup(html, self._parser)
        return self.resolve_links(base_url, (a.get("href") for a in soup.find_all("a", href=True)))

    def resolve_links(self, base_url: str, hrefs) -> list[str]:
        seen: set[str] = set()
        links: list[str] = []
        for href in hrefs:
            if not href:
                continue
            try:
                absolute = urljoin(base_url, href)
            except ValueError:
                logger.debug("Dropping unresolvable link %r on %s", href, base_url)
                continue
            normalized = normalize_url(absolute)
            if normalized is None or normalized in seen:
                continue
            seen.add(normalized)
            links.append(normalized)
        return links
