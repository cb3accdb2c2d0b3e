import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup

from crawldigest.domain.rendered_page import RenderedPage
from crawldigest.services.link_extractor import LinkExtractor

logger = logging.getLogger(__name__)

_NON_CONTENT_TAGS = ("script", "style", "noscript", "template")


class HtmlPageExtractor:
    """Builds a RenderedPage (title, description, selected text, links) from HTML."""

    def __init__(
        self,
        link_extractor: Optional[LinkExtractor] = None,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._link_extractor = link_extractor or LinkExtractor()
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract(self, url: str, html: str, selector: str = "body", base_url: Optional[str] = None) -> RenderedPage:
        """`base_url` (default `url`) is what relative links resolve against."""
        soup = self._soup_factory(html or "")
        return RenderedPage(
            url=url,
            title=self._title(soup),
            content=self._content(soup, selector),
            meta_description=self._meta_description(soup),
            html=html or "",
            outbound_links=tuple(self._link_extractor.extract_links(base_url or url, html)),
        )

    def _title(self, soup: BeautifulSoup) -> str:
        if soup.title is None or soup.title.string is None:
            return ""
        return soup.title.string.strip()

    def _meta_description(self, soup: BeautifulSoup) -> str:
        meta = soup.find("meta", attrs={"name": "description"})
        if meta is None:
            return ""
        return (meta.get("content") or "").strip()

    def _content(self, soup: BeautifulSoup, selector: str) -> str:
        try:
            element = soup.select_one(selector)
        except Exception:
            logger.exception("Invalid content selector %r", selector)
            return ""
        if element is None:
            return ""
        for tag in _NON_CONTENT_TAGS:
            for node in element.find_all(tag):
                node.decompose()
        return element.get_text(separator="\n", strip=True)
