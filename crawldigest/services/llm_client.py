"""Generation client for OpenAI-compatible chat-completion endpoints.

Any gateway that speaks the OpenAI chat API works (OpenAI itself, OpenRouter,
an Anthropic-compatible proxy, a local server) by pointing `base_url` at it.

Usage:
    client = LLMClient(api_key="...", base_url="https://openrouter.ai/api/v1")
    text = client.generate("Summarize: ...", model="anthropic/claude-3-haiku")
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import openai
from openai import OpenAI

from crawldigest.config import ANTHROPIC_OPENAI_BASE_URL
from crawldigest.exceptions import GenerationError, MissingGenerationCredentialError

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    def generate(self, prompt: str, *, model: str, max_tokens: int, temperature: float) -> str: ...


class LLMClient:
    def __init__(
        self,
        *,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        timeout: float = 120.0,
        client: Any = None,
    ) -> None:
        if not api_key:
            raise MissingGenerationCredentialError()
        self.base_url = base_url
        self.timeout = timeout
        if client is not None:
            self._client = client
        elif base_url:
            self._client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        else:
            self._client = OpenAI(api_key=api_key, timeout=timeout)

    def generate(self, prompt: str, *, model: str, max_tokens: int, temperature: float) -> str:
        """Send `prompt` as a single user message and return the completion text.

        Raises GenerationError on any API/transport failure or an empty reply.
        """
        try:
            resp = self._client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=int(max_tokens),
                temperature=float(temperature),
            )
        except openai.OpenAIError as e:
            raise GenerationError(f"{type(e).__name__}: {e}", e) from e

        text = (resp.choices[0].message.content or "").strip() if resp.choices else ""
        if not text:
            raise GenerationError(f"empty completion from model {model}")
        return text


def build_llm_client(api_key: Optional[str], base_url: Optional[str] = None, timeout: float = 120.0, model: Optional[str] = None) -> Optional[LLMClient]:
    """Return a client, or None when no credential is configured.

    Raises ValueError when `model` is a Claude model but no `base_url` is set:
    the default OpenAI endpoint would reject every call.
    """
    if api_key and not base_url and (model or "").lower().startswith("claude"):
        raise ValueError(
            f"LLM_MODEL {model!r} needs LLM_BASE_URL (e.g. {ANTHROPIC_OPENAI_BASE_URL}) or ANTHROPIC_API_KEY; "
            "the default OpenAI endpoint does not serve Claude models"
        )
    try:
        return LLMClient(api_key=api_key, base_url=base_url, timeout=timeout)
    except MissingGenerationCredentialError:
        logger.warning("LLM API key not found. AI processing will be skipped.")
        return None
