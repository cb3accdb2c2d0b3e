from typing import NamedTuple, Optional


class HttpResponse(NamedTuple):
    """Result of a plain HTTP GET.

    `url` is the final URL after redirects when the client reports one.
    """
    status_code: int
    text: str
    content_type: Optional[str] = None
    url: Optional[str] = None
