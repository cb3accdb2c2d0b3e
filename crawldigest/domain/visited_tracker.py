import threading


class VisitedTracker:
    """
    Tracks which URLs have been claimed for fetching during one crawl run.

    The set only grows. ``mark_if_new`` performs the membership check and the
    insert under one lock so two workers can never both claim the same URL.
    """

    def __init__(self):
        self._visited: set[str] = set()
        self._lock = threading.Lock()

    def mark_if_new(self, url: str) -> bool:
        """Mark `url` as visited; return False if it already was."""
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been visited."""
        with self._lock:
            return url in self._visited

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
