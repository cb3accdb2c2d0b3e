import pytest

from crawldigest.config import ANTHROPIC_OPENAI_BASE_URL, DEFAULT_OPENAI_MODEL
from crawldigest.container import Container, build_env


def _clear_llm_env(monkeypatch):
    for name in ("LLM_API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY", "LLM_BASE_URL", "LLM_MODEL"):
        monkeypatch.delenv(name, raising=False)


def _container_from_env():
    container = Container()
    container.config.from_dict(build_env())
    return container


def test_openai_key_only_pairs_default_endpoint_with_openai_model(monkeypatch):
    _clear_llm_env(monkeypatch)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    container = _container_from_env()

    client = container.llm_client()
    assert client is not None
    assert client.base_url is None
    assert container.generation_defaults().model == DEFAULT_OPENAI_MODEL
    assert container.synthesis_pipeline().default_params.model == DEFAULT_OPENAI_MODEL


def test_anthropic_key_only_uses_anthropic_endpoint_and_claude(monkeypatch):
    _clear_llm_env(monkeypatch)
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")

    container = _container_from_env()

    assert container.llm_client().base_url == ANTHROPIC_OPENAI_BASE_URL
    assert container.generation_defaults().model.startswith("claude-")


def test_claude_model_without_endpoint_is_refused(monkeypatch):
    _clear_llm_env(monkeypatch)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("LLM_MODEL", "claude-3-sonnet-20240229")

    container = _container_from_env()

    with pytest.raises(ValueError, match="LLM_BASE_URL"):
        container.llm_client()


def test_no_key_means_no_client(monkeypatch):
    _clear_llm_env(monkeypatch)

    container = _container_from_env()

    assert container.llm_client() is None
    assert container.synthesis_pipeline().generator is None


def test_respect_robots_default_read_from_env(monkeypatch):
    monkeypatch.setenv("RESPECT_ROBOTS_TXT", "false")
    assert build_env()["RESPECT_ROBOTS_TXT"] is False
