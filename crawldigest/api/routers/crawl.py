import logging
from typing import Callable, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from crawldigest.domain.crawl_options import CrawlOptions
from crawldigest.domain.synthesis import GenerationParams
from crawldigest.exceptions import InvalidSeedUrlError
from crawldigest.utils.datetime_utils import to_iso, utc_now

logger = logging.getLogger(__name__)


class AiProcessingRequest(BaseModel):
    task: str = "summarize"
    model: Optional[str] = None
    maxTokens: Optional[int] = Field(default=None, ge=1)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)


class CrawlRequest(BaseModel):
    url: Optional[str] = None
    depth: Optional[int] = Field(default=None, ge=0)
    selector: Optional[str] = None
    maxPages: Optional[int] = Field(default=None, ge=1)
    respectRobotsTxt: Optional[bool] = None
    waitTimeMs: Optional[int] = Field(default=None, ge=0)
    aiProcessing: Optional[AiProcessingRequest] = None


def create_crawl_router(crawl_executor_provider: Callable, synthesis_pipeline_provider: Callable, container_env: dict, debug: bool = False):
    """Create the crawl router.

    `crawl_executor_provider()` must return a fresh CrawlExecutor per request;
    `synthesis_pipeline_provider()` returns a SynthesisPipeline.
    """
    router = APIRouter(prefix="/api", tags=["Crawl"])

    def _options(req: CrawlRequest) -> CrawlOptions:
        return CrawlOptions(
            depth=req.depth if req.depth is not None else container_env.get("DEFAULT_DEPTH", 1),
            max_pages=req.maxPages if req.maxPages is not None else container_env.get("DEFAULT_MAX_PAGES", 100),
            selector=req.selector or "body",
            respect_robots_txt=req.respectRobotsTxt if req.respectRobotsTxt is not None else container_env.get("RESPECT_ROBOTS_TXT", True),
            wait_time_ms=req.waitTimeMs if req.waitTimeMs is not None else container_env.get("DEFAULT_WAIT_TIME_MS", 1000),
            timeout_ms=container_env.get("RENDER_TIMEOUT_MS", 30_000),
        )

    def _params(ai: AiProcessingRequest, defaults: GenerationParams) -> GenerationParams:
        return GenerationParams(
            model=ai.model or defaults.model,
            max_output_tokens=ai.maxTokens or defaults.max_output_tokens,
            temperature=ai.temperature if ai.temperature is not None else defaults.temperature,
        )

    def _internal_error(e: Exception) -> HTTPException:
        logger.error("Error in /api/crawl: %s", e, exc_info=True)
        return HTTPException(status_code=500, detail=str(e) if debug else "internal error")

    @router.post("/crawl")
    def crawl(req: CrawlRequest):
        if not req.url:
            raise HTTPException(status_code=400, detail="URL is required")
        try:
            options = _options(req)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        try:
            records = crawl_executor_provider().crawl(req.url, options)
        except InvalidSeedUrlError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            raise _internal_error(e)

        results = [r.to_dict() for r in records]
        if req.aiProcessing is not None:
            logger.info("Processing crawled content with AI")
            try:
                pipeline = synthesis_pipeline_provider()
                synthesis = pipeline.synthesize(records, req.aiProcessing.task, _params(req.aiProcessing, pipeline.default_params))
            except Exception as e:
                raise _internal_error(e)
            results = synthesis.to_dict()

        return {
            "success": True,
            "results": results,
            "meta": {
                "crawledAt": to_iso(utc_now()),
                "pagesProcessed": len(records),
            },
        }

    return router
