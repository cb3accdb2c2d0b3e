from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from crawldigest.utils.datetime_utils import to_iso


@dataclass(frozen=True)
class PageRecord:
    url: str
    title: str
    description: str
    content: str
    rendered_html: str
    crawled_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "content": self.content,
            "html": self.rendered_html,
            "crawledAt": to_iso(self.crawled_at),
        }
