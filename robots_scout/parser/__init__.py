# File: robots_scout/parser/__init__.py
"""robots_scout.parser: Строки -> записи -> группы User-Agent."""

from robots_scout.parser.groups import Group, build_groups, find_group
from robots_scout.parser.lines import Source, read_lines
from robots_scout.parser.records import iter_records

__all__ = ["Group", "Source", "build_groups", "find_group", "iter_records", "read_lines"]
