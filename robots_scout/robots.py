# File: robots_scout/robots.py
"""robots_scout.robots: Итоговые правила robots.txt для одного User-Agent.

Typical use::

    from robots_scout import build

    robots = build(response_body, "MyCrawler/2.1")
    if robots.allow("/catalog/page-2"):
        ...
    time.sleep(robots.crawl_delay.total_seconds())
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from robots_scout.logger import logger
from robots_scout.parser import Group, Source, build_groups, find_group, iter_records, read_lines
from robots_scout.rules import Rule, RuleKind, compile_rule

_DELAY_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True, slots=True)
class Robots:
    """Compiled rules of the group selected for one user-agent."""

    rules: Tuple[Rule, ...] = ()
    crawl_delay: timedelta = timedelta(0)

    def match(self, path: str) -> Optional[Rule]:
        """Return the most specific rule matching *path*, first one on ties."""
        best: Optional[Rule] = None
        for rule in self.rules:
            if rule.matches(path) and (best is None or rule.length > best.length):
                best = rule
        return best

    def allow(self, path: str) -> bool:
        """Return True if *path* may be crawled."""
        rule = self.match(path)
        return rule is None or rule.allows

    @classmethod
    def from_file(cls, path: Union[str, Path], user_agent: str) -> "Robots":
        """Read a robots.txt from disk and build the rules for *user_agent*."""
        return build(Path(path).read_bytes(), user_agent)


def parse_crawl_delay(value: Optional[str]) -> timedelta:
    """Parse a crawl-delay value in whole seconds; zero when absent or invalid."""
    if not value:
        return timedelta(0)
    if not _DELAY_RE.fullmatch(value):
        logger.debug("Ignoring crawl-delay %r: not a non-negative integer", value)
        return timedelta(0)
    try:
        return timedelta(seconds=int(value))
    except OverflowError:
        logger.debug("Ignoring crawl-delay %r: out of range", value)
        return timedelta(0)


def compile_group(group: Group) -> Tuple[Rule, ...]:
    """Compile allow rules first, then disallow rules, dropping empty patterns."""
    rules: List[Rule] = []
    for kind, values in ((RuleKind.ALLOW, group.allow), (RuleKind.DISALLOW, group.disallow)):
        for value in values:
            rule = compile_rule(kind, value)
            if rule.length > 0:
                rules.append(rule)
    return tuple(rules)


def build_from_lines(lines: Iterable[str], user_agent: str) -> Robots:
    groups = build_groups(iter_records(lines))
    group = find_group(groups, user_agent)
    if group is None:
        logger.debug("No robots.txt group matches %r (%d groups)", user_agent, len(groups))
        return Robots()

    logger.debug("User-agent %r matched group %s", user_agent, list(group.user_agents))
    rules = compile_group(group)
    logger.debug("Compiled %d rules for %r", len(rules), user_agent)
    return Robots(rules=rules, crawl_delay=parse_crawl_delay(group.crawl_delay))


def build(source: Source, user_agent: str) -> Robots:
    """Parse robots.txt *source* and return the rules that apply to *user_agent*.

    *source* may be bytes, text, a file object or an iterable of lines.
    Malformed content is skipped, never raised.
    """
    return build_from_lines(read_lines(source), user_agent)


__all__ = ["Robots", "parse_crawl_delay", "compile_group", "build_from_lines", "build"]
