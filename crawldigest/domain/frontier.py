from collections import deque
from typing import Iterable, NamedTuple, Optional


class FrontierEntry(NamedTuple):
    """A pending (url, depth) work item."""
    url: str
    depth: int


class Frontier:
    """FIFO queue of frontier entries.

    Dequeue order is insertion order, so the crawl is breadth-first: every
    entry at depth ``d`` is consumed before any entry queued later at ``d + 1``.
    """

    def __init__(self, entries: Optional[Iterable[FrontierEntry]] = None):
        self._queue: "deque[FrontierEntry]" = deque(entries or [])

    def push(self, url: str, depth: int) -> None:
        if depth < 0:
            raise ValueError(f"depth must be >= 0, got {depth}")
        self._queue.append(FrontierEntry(url=url, depth=depth))

    def pop(self) -> FrontierEntry:
        """Remove and return the head entry. Raises IndexError when empty."""
        return self._queue.popleft()

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)
