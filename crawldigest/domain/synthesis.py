from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from crawldigest.domain.page_record import PageRecord
from crawldigest.utils.datetime_utils import to_iso


@dataclass(frozen=True)
class GenerationParams:
    model: str = "claude-3-sonnet-20240229"
    max_output_tokens: int = 4000
    temperature: float = 0.7


@dataclass(frozen=True)
class SynthesisMeta:
    model: str
    processed_at: datetime
    pages_processed: int
    chunks_processed: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "processedAt": to_iso(self.processed_at),
            "pagesProcessed": self.pages_processed,
            "chunksProcessed": self.chunks_processed,
        }


@dataclass(frozen=True)
class SynthesisResult:
    """Outcome of one synthesis run.

    A skipped result (no generation capability configured) has `skipped=True`,
    no `result` and no `meta`, and carries the page records untouched.
    """

    task: str
    result: Optional[str]
    meta: Optional[SynthesisMeta]
    original_results: tuple[PageRecord, ...]
    skipped: bool = False
    error: Optional[str] = None

    @classmethod
    def skipped_result(cls, task: str, records, reason: str) -> "SynthesisResult":
        return cls(task=task, result=None, meta=None, original_results=tuple(records), skipped=True, error=reason)

    def to_dict(self) -> dict[str, Any]:
        original = [r.to_dict() for r in self.original_results]
        if self.skipped:
            return {"task": self.task, "skipped": True, "error": self.error, "originalResults": original}
        return {
            "task": self.task,
            "result": self.result,
            "meta": self.meta.to_dict() if self.meta is not None else None,
            "originalResults": original,
        }
