from crawldigest.services.robots_parser import parse_robots_txt
from crawldigest.services.scope_filter import ScopeFilter, origin_of


def test_origin_of():
    assert origin_of("https://Example.com/path") == "https://example.com"
    assert origin_of("http://example.com:8080/x") == "http://example.com:8080"
    assert origin_of("https://example.com:443/x") == "https://example.com"
    assert origin_of("/relative") is None
    assert origin_of("http://[::1") is None


def test_same_origin_is_in_scope():
    sf = ScopeFilter()
    assert sf.is_in_scope("https://example.com/a/b", "https://example.com")


def test_different_host_scheme_or_port_is_out_of_scope():
    sf = ScopeFilter()
    base = "https://example.com"
    assert not sf.is_in_scope("https://other.com/a", base)
    assert not sf.is_in_scope("https://blog.example.com/a", base)
    assert not sf.is_in_scope("http://example.com/a", base)
    assert not sf.is_in_scope("https://example.com:8443/a", base)
    assert not sf.is_in_scope("not a url", base)


def test_is_allowed_with_disallow_rule():
    rules = parse_robots_txt("User-agent: *\nDisallow: /private")
    sf = ScopeFilter()
    assert not sf.is_allowed("https://example.com/private/page", rules)
    assert sf.is_allowed("https://example.com/public/page", rules)


def test_is_allowed_without_rules():
    assert ScopeFilter().is_allowed("https://example.com/private", None)


def test_malformed_url_fails_open():
    rules = parse_robots_txt("User-agent: *\nDisallow: /")
    assert ScopeFilter().is_allowed("http://[::1/private", rules)
