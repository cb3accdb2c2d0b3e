from crawldigest.services.link_extractor import LinkExtractor, normalize_url

PAGE = "https://example.com/docs/guide/intro.html"


def test_relative_links_resolve_against_the_page_url():
    html = '<a href="next.html">n</a><a href="../api/">a</a><a href="/about">b</a>'
    links = LinkExtractor().extract_links(PAGE, html)
    assert links == [
        "https://example.com/docs/guide/next.html",
        "https://example.com/docs/api/",
        "https://example.com/about",
    ]


def test_links_are_deduplicated_in_document_order():
    html = (
        '<a href="/b">1</a>'
        '<a href="/a">2</a>'
        '<a href="/b#section">3</a>'
        '<a href="https://example.com/a">4</a>'
    )
    links = LinkExtractor().extract_links(PAGE, html)
    assert links == ["https://example.com/b", "https://example.com/a"]


def test_non_http_and_malformed_links_are_dropped():
    html = (
        '<a href="mailto:someone@example.com">m</a>'
        '<a href="javascript:void(0)">j</a>'
        '<a href="tel:+123">t</a>'
        '<a href="http://[::1">bad</a>'
        '<a href="">empty</a>'
        '<a href="https://other.org/x">ok</a>'
    )
    assert LinkExtractor().extract_links(PAGE, html) == ["https://other.org/x"]


def test_empty_html_has_no_links():
    assert LinkExtractor().extract_links(PAGE, "") == []


def test_normalize_url():
    assert normalize_url("https://example.com/a#frag") == "https://example.com/a"
    assert normalize_url("ftp://example.com/file") is None
    assert normalize_url("/relative/path") is None
    assert normalize_url("http://example.com:abc/") is None


def test_normalize_url_canonicalizes_scheme_host_port_and_empty_path():
    assert normalize_url("HTTPS://EXAMPLE.COM") == "https://example.com/"
    assert normalize_url("http://Example.com:80/Docs?Q=1") == "http://example.com/Docs?Q=1"
    assert normalize_url("https://example.com:443/a") == "https://example.com/a"
    assert normalize_url("https://example.com:8443/a") == "https://example.com:8443/a"
    assert normalize_url("http://user@Example.com/") == "http://user@example.com/"


def test_case_and_port_variants_deduplicate():
    html = '<a href="HTTPS://EXAMPLE.COM/about">1</a><a href="https://example.com:443/about">2</a>'
    assert LinkExtractor().extract_links(PAGE, html) == ["https://example.com/about"]
