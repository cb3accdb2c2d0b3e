import logging

from crawldigest.domain.robots_rules import AgentRules, RobotsRuleSet, WILDCARD_AGENT

logger = logging.getLogger(__name__)

_USER_AGENT = "user-agent"
_ALLOW = "allow"
_DISALLOW = "disallow"


def _split_directive(line: str):
    key, sep, value = line.partition(":")
    if not sep:
        return None, None
    # inline comments: "Disallow: /tmp # scratch"
    value = value.split("#", 1)[0]
    return key.strip().lower(), value.strip()


def parse_robots_txt(text: str) -> RobotsRuleSet:
    """Parse robots.txt content into a `RobotsRuleSet`.

    Directives before any User-agent line belong to the wildcard group.
    Consecutive User-agent lines open one shared group. Empty Allow/Disallow
    values carry no prefix and are ignored. Unknown directives are skipped.
    """
    allow: dict[str, list[str]] = {}
    disallow: dict[str, list[str]] = {}
    current_agents = [WILDCARD_AGENT]
    in_agent_block = False

    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        key, value = _split_directive(line)
        if key is None:
            logger.debug("Ignoring malformed robots.txt line: %r", line)
            continue

        if key == _USER_AGENT:
            agent = value.lower()
            if in_agent_block:
                current_agents.append(agent)
            else:
                current_agents = [agent]
                in_agent_block = True
            allow.setdefault(agent, [])
            disallow.setdefault(agent, [])
            continue

        in_agent_block = False
        if key not in (_ALLOW, _DISALLOW) or not value:
            continue
        target = allow if key == _ALLOW else disallow
        for agent in current_agents:
            target.setdefault(agent, []).append(value)

    agents = {
        agent: AgentRules(allow=tuple(allow.get(agent, [])), disallow=tuple(disallow.get(agent, [])))
        for agent in set(allow) | set(disallow)
    }
    return RobotsRuleSet(agents)
