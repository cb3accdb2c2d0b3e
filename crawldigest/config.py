import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

loaded = load_dotenv()
if not loaded and Path(".env").exists():
	raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_optional_str_env(name: str) -> Optional[str]:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return None
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_float_env(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return float(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_bool_env(name: str, default: bool) -> bool:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	value = raw.strip().lower()
	if value in ("1", "true", "yes", "on"):
		return True
	if value in ("0", "false", "no", "off"):
		return False
	logging.error("Invalid %s: %r", name, raw)
	return default


# Anthropic's OpenAI-compatible endpoint, used when only ANTHROPIC_API_KEY is set.
ANTHROPIC_OPENAI_BASE_URL = "https://api.anthropic.com/v1/"
DEFAULT_ANTHROPIC_MODEL = "claude-3-sonnet-20240229"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"


def _anthropic_key_only() -> bool:
	return (
		get_optional_str_env("LLM_API_KEY") is None
		and get_optional_str_env("OPENAI_API_KEY") is None
		and get_optional_str_env("ANTHROPIC_API_KEY") is not None
	)


def llm_api_key() -> Optional[str]:
	return (
		get_optional_str_env("LLM_API_KEY")
		or get_optional_str_env("OPENAI_API_KEY")
		or get_optional_str_env("ANTHROPIC_API_KEY")
	)


def llm_base_url() -> Optional[str]:
	explicit = get_optional_str_env("LLM_BASE_URL")
	if explicit:
		return explicit
	if _anthropic_key_only():
		return ANTHROPIC_OPENAI_BASE_URL
	return None


def llm_model() -> str:
	"""LLM_MODEL, else a default that the resolved endpoint actually serves."""
	explicit = get_optional_str_env("LLM_MODEL")
	if explicit:
		return explicit
	if llm_base_url() == ANTHROPIC_OPENAI_BASE_URL:
		return DEFAULT_ANTHROPIC_MODEL
	return DEFAULT_OPENAI_MODEL
