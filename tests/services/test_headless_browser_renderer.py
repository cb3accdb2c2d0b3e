from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from crawldigest.domain.rendered_page import RenderOptions
from crawldigest.exceptions import RenderError
from crawldigest.services.headless_browser_renderer import PlaywrightHeadlessRenderer


def _renderer_with_page(page):
    renderer = PlaywrightHeadlessRenderer(user_agent="ua")
    context = MagicMock()
    context.new_page.return_value = page
    # bypass the browser launch
    renderer._context = context
    return renderer


def test_close_without_launch_is_safe_and_idempotent():
    renderer = PlaywrightHeadlessRenderer(user_agent="ua")
    renderer.close()
    renderer.close()


def test_close_releases_all_resources_once():
    renderer = PlaywrightHeadlessRenderer(user_agent="ua")
    context, browser, playwright = MagicMock(), MagicMock(), MagicMock()
    renderer._context, renderer._browser, renderer._playwright = context, browser, playwright

    renderer.close()
    renderer.close()

    context.close.assert_called_once()
    browser.close.assert_called_once()
    playwright.stop.assert_called_once()


def test_render_extracts_page_fields():
    page = MagicMock()
    page.goto.return_value = MagicMock(ok=True, status=200)
    page.eval_on_selector_all.return_value = [
        "https://example.com/a#top",
        "/b",
        "mailto:someone@example.com",
    ]
    page.title.return_value = "Rendered"
    page.evaluate.side_effect = ["Visible text", "A description"]
    page.content.return_value = "<html>rendered</html>"
    renderer = _renderer_with_page(page)

    result = renderer.render("https://example.com/", RenderOptions(timeout_ms=5000, selector="main", wait_time_ms=250))

    assert result.title == "Rendered"
    assert result.content == "Visible text"
    assert result.meta_description == "A description"
    assert result.html == "<html>rendered</html>"
    assert result.outbound_links == ("https://example.com/a", "https://example.com/b")
    page.set_default_navigation_timeout.assert_called_once_with(5000)
    page.wait_for_timeout.assert_called_once_with(250)
    assert page.evaluate.call_args_list[0].args[1] == "main"
    page.close.assert_called_once()


def test_render_skips_wait_when_zero():
    page = MagicMock()
    page.goto.return_value = None
    page.eval_on_selector_all.return_value = []
    page.title.return_value = ""
    page.evaluate.side_effect = ["", ""]
    page.content.return_value = ""
    renderer = _renderer_with_page(page)

    renderer.render("https://example.com/", RenderOptions(wait_time_ms=0))

    page.wait_for_timeout.assert_not_called()


def test_navigation_timeout_raises_render_error_and_closes_page():
    page = MagicMock()
    page.goto.side_effect = PlaywrightTimeoutError("Timeout 10ms exceeded")
    renderer = _renderer_with_page(page)

    with pytest.raises(RenderError) as exc:
        renderer.render("https://example.com/slow", RenderOptions(timeout_ms=10))

    assert exc.value.url == "https://example.com/slow"
    assert "timeout" in exc.value.reason
    page.close.assert_called_once()


def test_page_open_failure_is_a_per_page_render_error():
    renderer = PlaywrightHeadlessRenderer(user_agent="ua")
    context = MagicMock()
    context.new_page.side_effect = PlaywrightError("Target page, context or browser has been closed")
    renderer._context = context

    with pytest.raises(RenderError) as exc:
        renderer.render("https://example.com/", RenderOptions())

    assert "has been closed" in exc.value.reason
