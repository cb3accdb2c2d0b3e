from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from crawldigest.services.headless_browser_renderer import PlaywrightHeadlessOptions, PlaywrightHeadlessRenderer
from crawldigest.services.html_page_extractor import HtmlPageExtractor
from crawldigest.services.http_page_renderer import HttpPageRenderer
from crawldigest.services.link_extractor import LinkExtractor
from crawldigest.services.page_renderer import PageRenderer

RENDER_MODES = ("http", "headless_chromium")


@dataclass(frozen=True)
class RendererFactory:
    """Creates a fresh page renderer per crawl run.

    Renderers own browser/session resources, so they are never shared across
    runs; the caller closes the one it gets.
    """

    http_service: object
    user_agent: str
    default_mode: str = "headless_chromium"
    wait_until: str = "networkidle"
    link_extractor: Optional[LinkExtractor] = None

    def create(self, render_mode: Optional[str] = None) -> PageRenderer:
        mode = (render_mode or self.default_mode or "").strip().lower()
        if mode == "":
            raise ValueError("render_mode is required")
        link_extractor = self.link_extractor or LinkExtractor()
        if mode == "http":
            return HttpPageRenderer(self.http_service, HtmlPageExtractor(link_extractor=link_extractor))
        if mode == "headless_chromium":
            return PlaywrightHeadlessRenderer(
                user_agent=self.user_agent,
                options=PlaywrightHeadlessOptions(wait_until=self.wait_until),
                link_extractor=link_extractor,
            )
        raise ValueError(f"Unknown render_mode: {render_mode!r}")
