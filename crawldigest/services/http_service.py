import requests
from typing import Callable, Optional

from crawldigest.domain.http_response import HttpResponse
from crawldigest.exceptions import HttpFetchError

PAGE_ACCEPT = "text/html,application/xhtml+xml;q=0.9,*/*;q=0.5"
ROBOTS_ACCEPT = "text/plain,*/*;q=0.5"


class HttpService:
    """
    Thin wrapper over an injected `requests.get`-style callable.

    Used for robots.txt and for the static (no JavaScript) page renderer.
    Transport failures surface as HttpFetchError; HTTP error statuses are
    returned as-is for the caller to judge.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str, accept: Optional[str] = None) -> HttpResponse:
        """GET `url` and return status, body text, Content-Type and final URL."""
        headers = {"User-Agent": self.user_agent}
        if accept:
            headers["Accept"] = accept
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        # Fakes may omit headers/url; real attribute errors still bubble up.
        content_type = resp.headers.get("Content-Type") if hasattr(resp, "headers") else None
        final_url = resp.url if isinstance(getattr(resp, "url", None), str) else url
        return HttpResponse(resp.status_code, resp.text, content_type, final_url)

    def fetch_page(self, url: str) -> HttpResponse:
        return self.fetch(url, accept=PAGE_ACCEPT)

    def fetch_robots(self, robots_url: str) -> HttpResponse:
        return self.fetch(robots_url, accept=ROBOTS_ACCEPT)
