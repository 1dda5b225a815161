"""Access Stats - User agent classification"""

from typing import Optional

from .models import AgentInfo
from .patterns import (
    BOT_MARKERS, NAMED_BOTS, OS_FAMILIES, BROWSER_FAMILIES,
    UNKNOWN_OS, OTHER_BROWSER,
)


def _first_match(ua: str, table, default: str) -> str:
    for matches, label in table:
        if matches(ua):
            return label
    return default


def is_bot(agent_raw: str) -> bool:
    ua = (agent_raw or "").lower()
    return any(marker in ua for marker in BOT_MARKERS)


def named_bot(agent_raw: str) -> Optional[str]:
    """Return "Googlebot" or "YandexBot" if the agent names one of them."""
    ua = (agent_raw or "").lower()
    for token, name in NAMED_BOTS:
        if token in ua:
            return name
    return None


def classify_agent(agent_raw: str) -> AgentInfo:
    if not agent_raw:
        return AgentInfo(is_bot=False, os_family=UNKNOWN_OS, browser_family=OTHER_BROWSER)

    ua = agent_raw.lower()
    return AgentInfo(
        is_bot=is_bot(ua),
        os_family=_first_match(ua, OS_FAMILIES, UNKNOWN_OS),
        browser_family=_first_match(ua, BROWSER_FAMILIES, OTHER_BROWSER),
    )
