from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

WILDCARD_AGENT = "*"


@dataclass(frozen=True)
class AgentRules:
    """Ordered allow/disallow path prefixes for one user-agent group."""

    allow: tuple[str, ...] = ()
    disallow: tuple[str, ...] = ()


@dataclass(frozen=True)
class RobotsRuleSet:
    """Parsed robots.txt rules keyed by lower-cased user-agent token.

    Only the wildcard group takes part in filtering decisions. Any matching
    allow prefix overrides any matching disallow prefix; no longest-match
    ordering is applied within a rule kind.
    """

    agents: Mapping[str, AgentRules] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "agents", MappingProxyType(dict(self.agents)))

    @classmethod
    def empty(cls) -> "RobotsRuleSet":
        return cls({})

    def rules_for(self, agent: str) -> AgentRules:
        return self.agents.get(agent.lower(), AgentRules())

    def is_path_allowed(self, path: str) -> bool:
        rules = self.rules_for(WILDCARD_AGENT)
        if any(path.startswith(prefix) for prefix in rules.allow):
            return True
        return not any(path.startswith(prefix) for prefix in rules.disallow)

    def is_empty(self) -> bool:
        return not any(r.allow or r.disallow for r in self.agents.values())
