import enum
import logging
import time
from typing import Optional

from crawldigest.domain.crawl_options import CrawlOptions
from crawldigest.domain.frontier import Frontier, FrontierEntry
from crawldigest.domain.page_record import PageRecord
from crawldigest.domain.rendered_page import RenderOptions
from crawldigest.domain.robots_rules import RobotsRuleSet
from crawldigest.domain.visited_tracker import VisitedTracker
from crawldigest.exceptions import InvalidSeedUrlError, RenderError
from crawldigest.services.crawl_policy import CrawlPolicy
from crawldigest.services.link_extractor import normalize_url
from crawldigest.services.robots_fetcher import RobotsFetcher, robots_url_for
from crawldigest.services.scope_filter import ScopeFilter, origin_of
from crawldigest.utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class CrawlState(enum.Enum):
    INIT = "init"
    DRAINING = "draining"
    DONE = "done"


class CrawlExecutor:
    """Executes one breadth-first crawl run given configured collaborators.

    This class owns the crawl control-flow (seed validation, robots loading,
    frontier draining, link enqueueing). It does NOT construct dependencies
    (that stays in the DI layer); a fresh renderer is requested per run and
    closed on every exit path.
    """

    def __init__(
        self,
        *,
        renderer_factory,
        robots_fetcher: RobotsFetcher,
        scope_filter: Optional[ScopeFilter] = None,
        delay_seconds: float = 0.0,
    ):
        self.renderer_factory = renderer_factory
        self.robots_fetcher = robots_fetcher
        self.scope_filter = scope_filter or ScopeFilter()
        self.delay_seconds = float(delay_seconds)
        self.state = CrawlState.INIT

    def _validate_seed(self, seed_url: str) -> tuple[str, str]:
        normalized = normalize_url(seed_url) if isinstance(seed_url, str) else None
        origin = origin_of(normalized) if normalized else None
        if normalized is None or origin is None:
            raise InvalidSeedUrlError(str(seed_url))
        return normalized, origin

    def _load_robots(self, seed_url: str, options: CrawlOptions) -> Optional[RobotsRuleSet]:
        if not options.respect_robots_txt:
            return None
        robots_url = robots_url_for(seed_url)
        logger.debug("Checking robots.txt at %s", robots_url)
        return self.robots_fetcher.fetch(robots_url)

    def crawl(self, seed_url: str, options: Optional[CrawlOptions] = None, render_mode: Optional[str] = None) -> list[PageRecord]:
        """Crawl from `seed_url` and return page records in crawl order.

        Raises InvalidSeedUrlError before any network activity when the seed
        is not an absolute http(s) URL. Per-page render failures are logged
        and skipped; a run that renders nothing returns an empty list.
        """
        options = options or CrawlOptions()
        self.state = CrawlState.INIT
        seed, base_origin = self._validate_seed(seed_url)
        logger.info("Starting crawl of %s with depth %s (max %s pages)", seed, options.depth, options.max_pages)

        renderer = self.renderer_factory.create(render_mode)
        try:
            policy = CrawlPolicy(
                self.scope_filter,
                base_origin=base_origin,
                max_depth=options.depth,
                robots_rules=self._load_robots(seed, options),
            )
            render_options = RenderOptions(
                timeout_ms=options.timeout_ms,
                selector=options.selector,
                wait_time_ms=options.wait_time_ms,
            )
            frontier = Frontier([FrontierEntry(seed, 0)])
            visited = VisitedTracker()
            records: list[PageRecord] = []

            self.state = CrawlState.DRAINING
            while not frontier.is_empty() and len(records) < options.max_pages:
                entry = frontier.pop()
                record = self._process_entry(entry, renderer, render_options, policy, visited, frontier)
                if record is not None:
                    records.append(record)

            self.state = CrawlState.DONE
            logger.info("Crawl completed. Processed %d pages.", len(records))
            return records
        finally:
            renderer.close()

    def _process_entry(self, entry: FrontierEntry, renderer, render_options: RenderOptions, policy: CrawlPolicy, visited: VisitedTracker, frontier: Frontier) -> Optional[PageRecord]:
        url, depth = entry
        if visited.is_visited(url):
            logger.debug("Skipping (visited) %s", url)
            return None
        if policy.should_skip_due_to_depth(depth):
            return None
        if policy.should_skip_due_to_scope(url):
            return None
        if policy.should_skip_due_to_robots(url):
            return None
        if not visited.mark_if_new(url):
            return None

        logger.debug("Crawling %s (depth %s)", url, depth)
        try:
            page = renderer.render(url, render_options)
        except RenderError as e:
            logger.error("Error processing %s: %s", url, e.reason)
            return None

        record = PageRecord(
            url=url,
            title=page.title,
            description=page.meta_description,
            content=page.content,
            rendered_html=page.html,
            crawled_at=utc_now(),
        )
        logger.info("Fetched %s (depth %s)", url, depth)

        if policy.should_expand(depth):
            self._enqueue_links(page.outbound_links, depth + 1, visited, frontier)

        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)
        return record

    def _enqueue_links(self, links, next_depth: int, visited: VisitedTracker, frontier: Frontier) -> None:
        unique = {}
        for link in links:
            normalized = normalize_url(link)
            if normalized is not None:
                unique.setdefault(normalized, None)
        for link in unique:
            if not visited.is_visited(link):
                frontier.push(link, next_depth)
