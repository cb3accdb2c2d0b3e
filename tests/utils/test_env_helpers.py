from crawldigest import config


def test_get_str_env_default_when_unset_or_empty(monkeypatch):
    monkeypatch.delenv("CD_TEST_STR", raising=False)
    assert config.get_str_env("CD_TEST_STR", "fallback") == "fallback"
    monkeypatch.setenv("CD_TEST_STR", "")
    assert config.get_str_env("CD_TEST_STR", "fallback") == "fallback"
    monkeypatch.setenv("CD_TEST_STR", "value")
    assert config.get_str_env("CD_TEST_STR", "fallback") == "value"


def test_get_int_env_invalid_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("CD_TEST_INT", "ten")
    assert config.get_int_env("CD_TEST_INT", 10) == 10
    assert "Invalid CD_TEST_INT" in caplog.text
    monkeypatch.setenv("CD_TEST_INT", "42")
    assert config.get_int_env("CD_TEST_INT", 10) == 42


def test_get_float_env(monkeypatch):
    monkeypatch.setenv("CD_TEST_FLOAT", "0.25")
    assert config.get_float_env("CD_TEST_FLOAT", 1.0) == 0.25
    monkeypatch.setenv("CD_TEST_FLOAT", "slow")
    assert config.get_float_env("CD_TEST_FLOAT", 1.0) == 1.0


def test_get_bool_env(monkeypatch):
    monkeypatch.setenv("CD_TEST_BOOL", "Yes")
    assert config.get_bool_env("CD_TEST_BOOL", False) is True
    monkeypatch.setenv("CD_TEST_BOOL", "off")
    assert config.get_bool_env("CD_TEST_BOOL", True) is False
    monkeypatch.setenv("CD_TEST_BOOL", "maybe")
    assert config.get_bool_env("CD_TEST_BOOL", True) is True


def test_optional_env(monkeypatch):
    monkeypatch.setenv("CD_TEST_OPT", "   ")
    assert config.get_optional_str_env("CD_TEST_OPT") is None


def test_llm_api_key_prefers_llm_key(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.setenv("LLM_API_KEY", "sk-llm")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-openai")
    assert config.llm_api_key() == "sk-llm"
    monkeypatch.delenv("LLM_API_KEY")
    assert config.llm_api_key() == "sk-openai"


def _clear_llm_env(monkeypatch):
    for name in ("LLM_API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY", "LLM_BASE_URL", "LLM_MODEL"):
        monkeypatch.delenv(name, raising=False)


def test_openai_key_alone_gets_an_openai_model(monkeypatch):
    _clear_llm_env(monkeypatch)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    assert config.llm_api_key() == "sk-test"
    assert config.llm_base_url() is None
    assert config.llm_model() == config.DEFAULT_OPENAI_MODEL


def test_anthropic_key_alone_targets_anthropic_endpoint(monkeypatch):
    _clear_llm_env(monkeypatch)
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
    assert config.llm_api_key() == "sk-ant-test"
    assert config.llm_base_url() == config.ANTHROPIC_OPENAI_BASE_URL
    assert config.llm_model() == "claude-3-sonnet-20240229"


def test_explicit_llm_settings_win(monkeypatch):
    _clear_llm_env(monkeypatch)
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
    monkeypatch.setenv("LLM_BASE_URL", "https://openrouter.ai/api/v1")
    monkeypatch.setenv("LLM_MODEL", "anthropic/claude-3-haiku")
    assert config.llm_base_url() == "https://openrouter.ai/api/v1"
    assert config.llm_model() == "anthropic/claude-3-haiku"
