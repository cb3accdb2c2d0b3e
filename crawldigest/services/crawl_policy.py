import logging
from typing import Optional

from crawldigest.domain.robots_rules import RobotsRuleSet
from crawldigest.services.scope_filter import ScopeFilter

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Per-run crawl decision rules: depth limit, origin scope and robots.txt.

    Built once per crawl run; holds that run's base origin and rule set.
    """

    def __init__(self, scope_filter: ScopeFilter, base_origin: str, max_depth: int, robots_rules: Optional[RobotsRuleSet] = None):
        self.scope_filter = scope_filter
        self.base_origin = base_origin
        self.max_depth = max_depth
        self.robots_rules = robots_rules

    def should_skip_due_to_depth(self, depth: int) -> bool:
        if depth > self.max_depth:
            logger.debug("Skipping (max depth reached) at depth %s", depth)
            return True
        return False

    def should_skip_due_to_scope(self, url: str) -> bool:
        if not self.scope_filter.is_in_scope(url, self.base_origin):
            logger.debug("Skipping %s - different origin than %s", url, self.base_origin)
            return True
        return False

    def should_skip_due_to_robots(self, url: str) -> bool:
        if self.robots_rules is None:
            return False
        if not self.scope_filter.is_allowed(url, self.robots_rules):
            logger.debug("Skipping %s - disallowed by robots.txt", url)
            return True
        return False

    def should_expand(self, depth: int) -> bool:
        """Links found on a page at `depth` are followed only below the max depth."""
        return depth < self.max_depth
