"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from crawldigest.domain.synthesis import GenerationParams
from crawldigest.services.crawl_executor import CrawlExecutor
from crawldigest.services.http_service import HttpService
from crawldigest.services.link_extractor import LinkExtractor
from crawldigest.services.llm_client import build_llm_client
from crawldigest.services.renderer_factory import RendererFactory
from crawldigest.services.robots_fetcher import RobotsFetcher
from crawldigest.services.scope_filter import ScopeFilter
from crawldigest.services.synthesis_pipeline import SynthesisPipeline
from crawldigest import config as env


# Environment variables used by the container (read via `crawldigest.config` helpers).
#
# USER_AGENT (str, default: "crawldigest/0.1")
#   User-Agent for robots.txt fetches, the static renderer and the browser context.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for robots.txt and static-renderer HTTP requests.
#
# CRAWL_DELAY (float seconds, default: 0.0)
#   Politeness delay after each rendered page within a crawl.
#
# RENDER_MODE (str, default: "headless_chromium")
#   "headless_chromium" (Playwright) or "http" (requests + BeautifulSoup, no JavaScript).
#
# RENDER_TIMEOUT_MS (int, default: 30000) / RENDER_WAIT_UNTIL (str, default: "networkidle")
#   Per-page navigation timeout and Playwright navigation condition.
#
# DEFAULT_DEPTH (1) / DEFAULT_MAX_PAGES (100) / DEFAULT_WAIT_TIME_MS (1000) / RESPECT_ROBOTS_TXT (true)
#   Crawl defaults applied when a request omits them.
#
# CHUNK_MAX_CHARS (int, default: 100000)
#   Character ceiling for each chunk sent to the model.
#
# SYNTHESIS_WORKERS (int, default: 1)
#   Concurrent per-chunk generation calls. Outputs are always combined in chunk order.
#
# LLM_API_KEY / OPENAI_API_KEY / ANTHROPIC_API_KEY (str | optional, first set wins)
#   Generation credential. Unset means AI processing returns a skipped result.
#
# LLM_BASE_URL (str | optional)
#   OpenAI-compatible endpoint, e.g. https://openrouter.ai/api/v1. Defaults to
#   Anthropic's OpenAI-compatible endpoint when only ANTHROPIC_API_KEY is set.
#
# LLM_MODEL (default: "claude-3-sonnet-20240229" on the Anthropic endpoint, else "gpt-4o-mini") / LLM_MAX_TOKENS (4000) / LLM_TEMPERATURE (0.7)
#   Default generation parameters.
#
# LLM_TIMEOUT (float seconds, default: 120)
#   Timeout per generation call.
def build_env() -> dict:
    return {
        "USER_AGENT": env.get_str_env("USER_AGENT", "crawldigest/0.1"),
        "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 10),
        "CRAWL_DELAY": env.get_float_env("CRAWL_DELAY", 0.0),
        "RENDER_MODE": env.get_str_env("RENDER_MODE", "headless_chromium").strip().lower(),
        "RENDER_TIMEOUT_MS": env.get_int_env("RENDER_TIMEOUT_MS", 30_000),
        "RENDER_WAIT_UNTIL": env.get_str_env("RENDER_WAIT_UNTIL", "networkidle"),
        "DEFAULT_DEPTH": env.get_int_env("DEFAULT_DEPTH", 1),
        "DEFAULT_MAX_PAGES": env.get_int_env("DEFAULT_MAX_PAGES", 100),
        "DEFAULT_WAIT_TIME_MS": env.get_int_env("DEFAULT_WAIT_TIME_MS", 1000),
        "RESPECT_ROBOTS_TXT": env.get_bool_env("RESPECT_ROBOTS_TXT", True),
        "CHUNK_MAX_CHARS": env.get_int_env("CHUNK_MAX_CHARS", 100_000),
        "SYNTHESIS_WORKERS": env.get_int_env("SYNTHESIS_WORKERS", 1),
        "LLM_API_KEY": env.llm_api_key(),
        "LLM_BASE_URL": env.llm_base_url(),
        "LLM_MODEL": env.llm_model(),
        "LLM_MAX_TOKENS": env.get_int_env("LLM_MAX_TOKENS", 4000),
        "LLM_TEMPERATURE": env.get_float_env("LLM_TEMPERATURE", 0.7),
        "LLM_TIMEOUT": env.get_float_env("LLM_TIMEOUT", 120.0),
    }


ENV = build_env()


class Container(containers.DeclarativeContainer):
    """Dependency injection container for the crawldigest application."""

    # Configuration
    config = providers.Configuration(default=ENV)

    # Services - Singleton instances
    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    robots_fetcher = providers.Singleton(
        RobotsFetcher,
        http_service=http_service,
    )

    scope_filter = providers.Singleton(ScopeFilter)

    link_extractor = providers.Singleton(LinkExtractor)

    renderer_factory = providers.Singleton(
        RendererFactory,
        http_service=http_service,
        user_agent=config.USER_AGENT.as_(str),
        default_mode=config.RENDER_MODE.as_(str),
        wait_until=config.RENDER_WAIT_UNTIL.as_(str),
        link_extractor=link_extractor,
    )

    # One executor per crawl run: it tracks the run's state.
    crawl_executor = providers.Factory(
        CrawlExecutor,
        renderer_factory=renderer_factory,
        robots_fetcher=robots_fetcher,
        scope_filter=scope_filter,
        delay_seconds=config.CRAWL_DELAY.as_(float),
    )

    # None when no credential is configured.
    llm_client = providers.Singleton(
        build_llm_client,
        api_key=config.LLM_API_KEY,
        base_url=config.LLM_BASE_URL,
        timeout=config.LLM_TIMEOUT.as_(float),
        model=config.LLM_MODEL,
    )

    generation_defaults = providers.Factory(
        GenerationParams,
        model=config.LLM_MODEL.as_(str),
        max_output_tokens=config.LLM_MAX_TOKENS.as_(int),
        temperature=config.LLM_TEMPERATURE.as_(float),
    )

    synthesis_pipeline = providers.Factory(
        SynthesisPipeline,
        generator=llm_client,
        max_chunk_size=config.CHUNK_MAX_CHARS.as_(int),
        default_params=generation_defaults,
        max_workers=config.SYNTHESIS_WORKERS.as_(int),
    )
