import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional

from crawldigest.domain.page_record import PageRecord
from crawldigest.domain.synthesis import GenerationParams, SynthesisMeta, SynthesisResult
from crawldigest.exceptions import GenerationError
from crawldigest.services.chunker import DEFAULT_MAX_CHUNK_SIZE, chunk_text
from crawldigest.services.llm_client import TextGenerator
from crawldigest.services.prompt_templates import build_combine_prompt, build_task_prompt
from crawldigest.utils.datetime_utils import utc_now
from crawldigest.utils.text_utils import estimate_token_count

logger = logging.getLogger(__name__)

PAGE_DELIMITER = "\n\n<<<<< PAGE BREAK >>>>>\n\n"
SKIPPED_REASON = "LLM API key not configured"


def chunk_error_placeholder(index: int, error: Exception) -> str:
    return f"[Error processing chunk {index}: {error}]"


class SynthesisPipeline:
    """Turns crawled page records into one generated text for a task.

    The combined document is chunked under `max_chunk_size` characters, each
    chunk is sent to the generator with the task prompt, and when more than
    one chunk was produced a single combining call merges the partial outputs.
    A failed chunk becomes an inline placeholder; a failed combining call falls
    back to the joined partial outputs. Without a generator the pipeline
    returns a skipped result carrying the records untouched.
    """

    def __init__(
        self,
        generator: Optional[TextGenerator],
        *,
        max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
        default_params: Optional[GenerationParams] = None,
        max_workers: int = 1,
    ):
        if max_chunk_size <= 0:
            raise ValueError(f"max_chunk_size must be > 0, got {max_chunk_size}")
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.generator = generator
        self.max_chunk_size = int(max_chunk_size)
        self.default_params = default_params or GenerationParams()
        self.max_workers = int(max_workers)

    @staticmethod
    def build_document(records: Iterable[PageRecord]) -> str:
        blocks = [f"## Page: {r.title} ({r.url})\n\n{r.content}" for r in records]
        return PAGE_DELIMITER.join(blocks)

    def synthesize(self, records: Iterable[PageRecord], task: str = "summarize", params: Optional[GenerationParams] = None) -> SynthesisResult:
        records = tuple(records)
        params = params or self.default_params

        if self.generator is None:
            logger.warning("LLM API key not found. AI processing skipped.")
            return SynthesisResult.skipped_result(task, records, SKIPPED_REASON)

        logger.info("Processing %d pages with AI, task: %s", len(records), task)
        chunks = chunk_text(self.build_document(records), self.max_chunk_size) if records else []
        logger.info("Split content into %d chunks (max %d chars)", len(chunks), self.max_chunk_size)

        outputs = self._generate_all(chunks, task, params)
        final = "\n\n".join(outputs)
        if len(outputs) > 1:
            final = self._combine(outputs, params, fallback=final)

        meta = SynthesisMeta(
            model=params.model,
            processed_at=utc_now(),
            pages_processed=len(records),
            chunks_processed=len(chunks),
        )
        return SynthesisResult(task=task, result=final, meta=meta, original_results=records)

    def _generate_all(self, chunks: list[str], task: str, params: GenerationParams) -> list[str]:
        jobs = [(i, chunk) for i, chunk in enumerate(chunks, start=1)]
        total = len(jobs)
        if self.max_workers == 1 or total <= 1:
            return [self._generate_chunk(i, total, chunk, task, params) for i, chunk in jobs]
        # map() yields in submission order, so outputs stay in chunk order
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="synthesis") as pool:
            return list(pool.map(lambda job: self._generate_chunk(job[0], total, job[1], task, params), jobs))

    def _generate_chunk(self, index: int, total: int, chunk: str, task: str, params: GenerationParams) -> str:
        logger.debug("Processing chunk %d/%d (~%d tokens)", index, total, estimate_token_count(chunk))
        prompt = build_task_prompt(task, chunk)
        try:
            return self.generator.generate(
                prompt,
                model=params.model,
                max_tokens=params.max_output_tokens,
                temperature=params.temperature,
            )
        except GenerationError as e:
            logger.error("Error generating chunk %d/%d: %s", index, total, e)
            return chunk_error_placeholder(index, e)
        except Exception as e:
            logger.error("Unexpected error generating chunk %d/%d: %s", index, total, e, exc_info=True)
            return chunk_error_placeholder(index, e)

    def _combine(self, outputs: list[str], params: GenerationParams, fallback: str) -> str:
        logger.debug("Combining %d chunk results with additional API call", len(outputs))
        try:
            return self.generator.generate(
                build_combine_prompt(outputs),
                model=params.model,
                max_tokens=params.max_output_tokens,
                temperature=params.temperature,
            )
        except GenerationError as e:
            logger.error("Error combining results: %s", e)
        except Exception as e:
            logger.error("Unexpected error combining results: %s", e, exc_info=True)
        return fallback
