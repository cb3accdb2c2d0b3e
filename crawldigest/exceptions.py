"""Custom exceptions for crawldigest services."""
from typing import Optional


class InvalidSeedUrlError(ValueError):
    """Raised when a crawl is requested for a seed that is not an absolute http(s) URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url}")


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class RobotsFetchError(Exception):
    """Raised when robots.txt cannot be fetched or parsed."""

    def __init__(self, robots_url: str, reason: str):
        self.robots_url = robots_url
        self.reason = reason
        super().__init__(f"Could not load robots.txt from {robots_url}: {reason}")


class RenderError(Exception):
    """Raised when a page renderer cannot produce a page (timeout, navigation, status)."""

    def __init__(self, url: str, reason: str, original: Optional[Exception] = None):
        self.url = url
        self.reason = reason
        self.original = original
        super().__init__(f"Render failed for {url}: {reason}")


class GenerationError(Exception):
    """Raised when the language model call fails (quota, auth, network, empty output)."""

    def __init__(self, reason: str, original: Optional[Exception] = None):
        self.reason = reason
        self.original = original
        super().__init__(reason)


class MissingGenerationCredentialError(RuntimeError):
    """Raised when a generation client is built without an API key."""

    def __init__(self):
        super().__init__("Missing LLM API key. Set LLM_API_KEY or OPENAI_API_KEY.")
