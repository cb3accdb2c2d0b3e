from __future__ import annotations

from typing import Protocol

from crawldigest.domain.rendered_page import RenderedPage, RenderOptions


class PageRenderer(Protocol):
    """Render a URL and return its text, title, metadata, HTML and outbound links.

    Implementations raise `RenderError` on timeout or navigation failure and
    release any browser/session resources in `close()`.
    """

    def render(self, url: str, options: RenderOptions) -> RenderedPage: ...

    def close(self) -> None: ...
