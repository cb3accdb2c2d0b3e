"""Domain objects for crawldigest - explicit re-exports to satisfy linters."""
from .frontier import Frontier as Frontier, FrontierEntry as FrontierEntry
from .visited_tracker import VisitedTracker as VisitedTracker
from .robots_rules import RobotsRuleSet as RobotsRuleSet, AgentRules as AgentRules
from .rendered_page import RenderedPage as RenderedPage, RenderOptions as RenderOptions
from .page_record import PageRecord as PageRecord
from .crawl_options import CrawlOptions as CrawlOptions
from .synthesis import GenerationParams as GenerationParams, SynthesisMeta as SynthesisMeta, SynthesisResult as SynthesisResult

__all__ = [
    "Frontier",
    "FrontierEntry",
    "VisitedTracker",
    "RobotsRuleSet",
    "AgentRules",
    "RenderedPage",
    "RenderOptions",
    "PageRecord",
    "CrawlOptions",
    "GenerationParams",
    "SynthesisMeta",
    "SynthesisResult",
]
