import logging
from urllib.parse import urlparse

from crawldigest.domain.robots_rules import RobotsRuleSet
from crawldigest.exceptions import HttpFetchError, RobotsFetchError
from crawldigest.services.robots_parser import parse_robots_txt

logger = logging.getLogger(__name__)


def robots_url_for(url: str) -> str:
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}/robots.txt"


class RobotsFetcher:
    """Fetch robots.txt content and return a parsed RobotsRuleSet.

    Uses an `http_service` with a `fetch_robots(url)` method that returns
    an HttpResponse.
    """

    def __init__(self, http_service):
        self.http_service = http_service

    def fetch_strict(self, robots_url: str) -> RobotsRuleSet:
        """Fetch and parse, raising RobotsFetchError on any failure."""
        try:
            response = self.http_service.fetch_robots(robots_url)
        except HttpFetchError as e:
            raise RobotsFetchError(robots_url, str(e.original)) from e

        if response.status_code != 200:
            raise RobotsFetchError(robots_url, f"status {response.status_code}")

        try:
            return parse_robots_txt(response.text or "")
        except Exception as e:
            raise RobotsFetchError(robots_url, f"unparseable: {e}") from e

    def fetch(self, robots_url: str) -> RobotsRuleSet:
        """Best-effort fetch: any failure yields an empty rule set."""
        try:
            rules = self.fetch_strict(robots_url)
        except RobotsFetchError as e:
            logger.warning("Could not fetch robots.txt: %s", e)
            return RobotsRuleSet.empty()
        logger.debug("Loaded robots.txt from %s (%d agent groups)", robots_url, len(rules.agents))
        return rules
