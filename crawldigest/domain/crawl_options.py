from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CrawlOptions:
    """Per-run crawl settings.

    - `depth`: how many link hops to follow from the seed (0 = seed only).
    - `max_pages`: hard ceiling on produced page records.
    - `selector`: CSS selector whose text becomes the page content.
    - `respect_robots_txt`: consult the site's robots.txt wildcard group.
    - `wait_time_ms`: settle delay after navigation, before extraction.
    - `timeout_ms`: per-page navigation timeout.
    """

    depth: int = 1
    max_pages: int = 100
    selector: str = "body"
    respect_robots_txt: bool = True
    wait_time_ms: int = 1000
    timeout_ms: int = 30_000

    def __post_init__(self):
        if self.depth < 0:
            raise ValueError("depth must be >= 0")
        if self.max_pages < 1:
            raise ValueError("max_pages must be >= 1")
        if self.wait_time_ms < 0:
            raise ValueError("wait_time_ms must be >= 0")
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be > 0")
        if not self.selector or not self.selector.strip():
            raise ValueError("selector is required")
