from unittest.mock import Mock

from dependency_injector import providers
from fastapi.testclient import TestClient

from crawldigest.api.server import create_app
from crawldigest.container import Container


def _client(executor=None):
    container = Container()
    if executor is not None:
        container.crawl_executor.override(providers.Object(executor))
    return TestClient(create_app(container))


def test_healthcheck_over_http():
    response = _client().get("/api/healthcheck")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_crawl_without_url_is_400():
    executor = Mock()
    response = _client(executor).post("/api/crawl", json={})
    assert response.status_code == 400
    assert response.json()["detail"] == "URL is required"
    executor.crawl.assert_not_called()


def test_crawl_rejects_negative_depth():
    response = _client(Mock()).post("/api/crawl", json={"url": "https://example.com", "depth": -1})
    assert response.status_code == 422


def test_crawl_happy_path_with_stub_executor():
    executor = Mock(crawl=Mock(return_value=[]))
    response = _client(executor).post("/api/crawl", json={"url": "https://example.com", "maxPages": 3})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["results"] == []
    assert body["meta"]["pagesProcessed"] == 0
