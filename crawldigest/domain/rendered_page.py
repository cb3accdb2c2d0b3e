from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RenderOptions:
    timeout_ms: int = 30_000
    selector: str = "body"
    wait_time_ms: int = 1000


@dataclass(frozen=True)
class RenderedPage:
    """What a page renderer hands back for one URL."""

    url: str
    title: str
    content: str
    meta_description: str
    html: str
    outbound_links: tuple[str, ...] = field(default_factory=tuple)
