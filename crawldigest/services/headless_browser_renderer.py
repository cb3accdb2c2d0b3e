from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from crawldigest.domain.rendered_page import RenderedPage, RenderOptions
from crawldigest.exceptions import RenderError
from crawldigest.services.link_extractor import LinkExtractor

logger = logging.getLogger(__name__)

_SELECTED_TEXT_JS = """(sel) => {
  const element = document.querySelector(sel);
  return element ? element.innerText : '';
}"""

_META_DESCRIPTION_JS = """() => {
  const meta = document.querySelector('meta[name="description"]');
  return meta ? meta.getAttribute('content') || '' : '';
}"""

_HREFS_JS = "(anchors) => anchors.map(a => a.href)"


@dataclass(frozen=True)
class PlaywrightHeadlessOptions:
    wait_until: str = "networkidle"  # domcontentloaded | load | networkidle
    launch_args: tuple[str, ...] = ("--no-sandbox", "--disable-setuid-sandbox")


class PlaywrightHeadlessRenderer:
    """Headless Chromium renderer backed by Playwright's sync API.

    One browser is launched lazily on first use and reused for every page of
    the run; each URL gets its own page, closed after extraction. `close()`
    tears down context, browser and the Playwright driver. Instances must be
    used from the thread that created the browser.

    A browser that cannot be launched raises RuntimeError (aborts the run);
    per-page navigation failures raise RenderError.
    """

    def __init__(self, *, user_agent: str, options: Optional[PlaywrightHeadlessOptions] = None, link_extractor: Optional[LinkExtractor] = None):
        self._user_agent = user_agent
        self._options = options or PlaywrightHeadlessOptions()
        self._link_extractor = link_extractor or LinkExtractor()
        self._playwright = None
        self._browser = None
        self._context = None

    def _ensure_context(self):
        if self._context is not None:
            return self._context
        try:
            self._playwright = sync_playwright().start()
            self._browser = self._playwright.chromium.launch(headless=True, args=list(self._options.launch_args))
            self._context = self._browser.new_context(user_agent=self._user_agent)
        except PlaywrightError as e:
            self.close()
            raise RuntimeError(
                f"Headless render requested but Chromium could not be launched: {e}. "
                "Run 'python -m playwright install chromium'."
            ) from e
        return self._context

    def render(self, url: str, options: RenderOptions) -> RenderedPage:
        context = self._ensure_context()
        page = None
        try:
            page = context.new_page()
            page.set_default_navigation_timeout(options.timeout_ms)
            resp = page.goto(url, wait_until=self._options.wait_until, timeout=options.timeout_ms)
            if resp is not None and not resp.ok:
                logger.warning("Non-success status for %s: %s", url, resp.status)
            if options.wait_time_ms > 0:
                page.wait_for_timeout(options.wait_time_ms)

            hrefs = page.eval_on_selector_all("a[href]", _HREFS_JS)
            return RenderedPage(
                url=url,
                title=page.title() or "",
                content=page.evaluate(_SELECTED_TEXT_JS, options.selector) or "",
                meta_description=page.evaluate(_META_DESCRIPTION_JS) or "",
                html=page.content(),
                outbound_links=tuple(self._link_extractor.resolve_links(url, hrefs)),
            )
        except PlaywrightTimeoutError as e:
            raise RenderError(url, f"navigation timeout after {options.timeout_ms}ms", e) from e
        except PlaywrightError as e:
            raise RenderError(url, str(e), e) from e
        finally:
            if page is not None:
                try:
                    page.close()
                except PlaywrightError:
                    logger.debug("Error closing page for %s", url, exc_info=True)

    def close(self) -> None:
        for name in ("_context", "_browser"):
            resource = getattr(self, name)
            setattr(self, name, None)
            if resource is None:
                continue
            try:
                resource.close()
            except PlaywrightError:
                logger.debug("Error closing %s", name, exc_info=True)
        if self._playwright is not None:
            playwright, self._playwright = self._playwright, None
            try:
                playwright.stop()
            except PlaywrightError:
                logger.debug("Error stopping playwright", exc_info=True)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
