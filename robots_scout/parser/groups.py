# File: robots_scout/parser/groups.py
"""robots_scout.parser.groups: Группировка записей robots.txt по User-Agent и выбор группы.

A group starts with one or more consecutive ``user-agent`` records and
collects the ``allow``/``disallow``/``crawl-delay`` records that follow.
The first ``user-agent`` record after a member closes the group.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from robots_scout.parser.records import Record
from robots_scout.rules import utf8_len

WILDCARD = "*"

_USER_AGENT_FIELDS = ("user-agent", "useragent")
_CRAWL_DELAY_FIELDS = ("crawl-delay", "crawldelay")


@dataclass(frozen=True, slots=True)
class Group:
    """User-agents sharing one set of allow/disallow/crawl-delay members."""

    user_agents: Tuple[str, ...] = ()
    allow: Tuple[str, ...] = ()
    disallow: Tuple[str, ...] = ()
    crawl_delay: Optional[str] = None

    def has_members(self) -> bool:
        return bool(self.allow or self.disallow or self.crawl_delay)

    def has_user_agents(self) -> bool:
        return bool(self.user_agents)

    def matches(self, name: str) -> Tuple[bool, int]:
        """Check *name* (lower-cased) against the group's user-agents.

        Returns ``(matched, length)``. The length is the UTF-8 size of the
        longest user-agent that is a prefix of *name*; a wildcard match
        alone has length 0.
        """
        matched, length = False, 0
        for agent in self.user_agents:
            if agent == WILDCARD:
                matched = True
            if name.startswith(agent):
                matched = True
                length = max(length, utf8_len(agent))
        return matched, length


@dataclass(slots=True)
class _Accumulator:
    """Mutable state of the group currently being read."""

    user_agents: List[str] = field(default_factory=list)
    allow: List[str] = field(default_factory=list)
    disallow: List[str] = field(default_factory=list)
    crawl_delay: Optional[str] = None

    def has_members(self) -> bool:
        return bool(self.allow or self.disallow or self.crawl_delay)

    def freeze(self) -> Group:
        return Group(
            user_agents=tuple(self.user_agents),
            allow=tuple(self.allow),
            disallow=tuple(self.disallow),
            crawl_delay=self.crawl_delay,
        )


def normalize_agent(value: str) -> str:
    """Lower-case a user-agent and drop trailing wildcards (prefix match makes them redundant)."""
    if value == WILDCARD:
        return value
    return value.rstrip(WILDCARD).lower()


def _flush(active: _Accumulator, groups: List[Group]) -> None:
    group = active.freeze()
    if group.has_members() and group.has_user_agents():
        groups.append(group)


def build_groups(records: Iterable[Record]) -> List[Group]:
    """Fold *records* into the list of groups in file order."""
    groups: List[Group] = []
    active = _Accumulator()

    for name, value in records:
        if name in _USER_AGENT_FIELDS:
            if active.has_members():
                _flush(active, groups)
                active = _Accumulator()
            active.user_agents.append(normalize_agent(value))
        elif name == "allow":
            active.allow.append(value)
        elif name == "disallow":
            active.disallow.append(value)
        elif name in _CRAWL_DELAY_FIELDS:
            active.crawl_delay = value

    _flush(active, groups)
    return groups


def find_group(groups: Sequence[Group], name: str) -> Optional[Group]:
    """Return the group with the most specific user-agent matching *name*.

    On equal specificity the group appearing first in the file wins.
    """
    name = name.lower()
    result: Optional[Group] = None
    longest = -1
    for group in groups:
        matched, length = group.matches(name)
        if matched and length > longest:
            result, longest = group, length
    return result


__all__ = ["WILDCARD", "Group", "normalize_agent", "build_groups", "find_group"]
