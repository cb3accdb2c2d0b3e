import logging
from typing import Optional

from crawldigest.domain.rendered_page import RenderedPage, RenderOptions
from crawldigest.exceptions import HttpFetchError, RenderError
from crawldigest.services.html_page_extractor import HtmlPageExtractor

logger = logging.getLogger(__name__)


class HttpPageRenderer:
    """Static renderer: plain HTTP GET plus BeautifulSoup extraction, no JavaScript."""

    def __init__(self, http_service, extractor: Optional[HtmlPageExtractor] = None):
        self._http_service = http_service
        self._extractor = extractor or HtmlPageExtractor()

    def render(self, url: str, options: RenderOptions) -> RenderedPage:
        try:
            response = self._http_service.fetch_page(url)
        except HttpFetchError as e:
            raise RenderError(url, str(e.original), e) from e

        if response.status_code < 200 or response.status_code >= 300:
            raise RenderError(url, f"status {response.status_code}")

        ct = (response.content_type or "").lower()
        if ct and not (ct.startswith("text/") or "application/xhtml+xml" in ct):
            raise RenderError(url, f"unsupported content type {ct}")

        # relative links resolve against where redirects landed
        return self._extractor.extract(url, response.text, options.selector, base_url=response.url or url)

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
