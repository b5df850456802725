# File: robots_scout/rules.py
"""robots_scout.rules: Компиляция шаблонов allow/disallow и сопоставление путей.

A path pattern is split on ``*``. The first segment (when non-empty) is a
prefix the path must start with, a last segment ending in ``$`` is a
suffix the path must end with, and every segment in between is a needle
that must occur in order between the two. A pattern without wildcards
that ends in ``$`` matches one path exactly.

Example::

    >>> rule = compile_rule(RuleKind.DISALLOW, "/fish*.php")
    >>> rule.matches("/fish/salmon.php"), rule.matches("/Fish.PHP")
    (True, False)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

WILDCARD = "*"
END_ANCHOR = "$"


class RuleKind(str, enum.Enum):
    ALLOW = "allow"
    DISALLOW = "disallow"


@dataclass(frozen=True, slots=True)
class Equals:
    """Matches the whole path."""

    value: str

    def matches(self, path: str) -> bool:
        return path == self.value


@dataclass(frozen=True, slots=True)
class Bounded:
    """Optional prefix and suffix with ordered needles in between."""

    prefix: Optional[str] = None
    suffix: Optional[str] = None
    needles: Tuple[str, ...] = ()

    def matches(self, path: str) -> bool:
        prefix, suffix = self.prefix or "", self.suffix or ""
        if not path.startswith(prefix) or not path.endswith(suffix):
            return False
        if not self.needles:
            return True

        # needles must not match inside the prefix or suffix
        middle = path[len(prefix):len(path) - len(suffix)]
        start = 0
        for needle in self.needles:
            pos = middle.find(needle, start)
            if pos < 0:
                return False
            start = pos + len(needle)
        return True


Pattern = Union[Equals, Bounded]


def utf8_len(text: str) -> int:
    """Length of *text* in UTF-8 bytes, the unit specificity is measured in."""
    return len(text.encode("utf-8", errors="surrogatepass"))


@dataclass(frozen=True, slots=True)
class Rule:
    """Compiled allow/disallow record.

    ``length`` is the specificity weight: the pattern size in UTF-8 bytes.
    """

    kind: RuleKind
    length: int
    pattern: Pattern
    source: str = ""

    @property
    def allows(self) -> bool:
        return self.kind is RuleKind.ALLOW

    def matches(self, path: str) -> bool:
        """Return True if the rule applies to *path* (case-sensitive)."""
        if self.length <= 0:
            return False
        return self.pattern.matches(path)


def split_pattern(value: str) -> Tuple[List[str], bool, bool]:
    """Split *value* on wildcards, e.g. ``"/foo*bar/"`` -> ``["/foo", "bar/"]``.

    Also reports whether the pattern has a prefix (does not start with
    ``*``) and a suffix (ends with ``$``). A prefix gets a leading ``/``
    if it lacks one; the ``$`` anchor is removed from the last segment.
    """
    parts = value.split(WILDCARD)
    has_prefix = parts[0] != ""
    has_suffix = parts[-1].endswith(END_ANCHOR)
    if has_prefix and not parts[0].startswith("/"):
        parts[0] = "/" + parts[0]
    if has_suffix:
        parts[-1] = parts[-1][: -len(END_ANCHOR)]
    return parts, has_prefix, has_suffix


def compile_rule(kind: RuleKind, value: str) -> Rule:
    """Compile the value of an allow/disallow record."""
    parts, has_prefix, has_suffix = split_pattern(value)

    if has_prefix and has_suffix and len(parts) == 1:
        return Rule(kind=kind, length=utf8_len(value), pattern=Equals(parts[0]), source=value)

    inner = parts[1 if has_prefix else 0:]
    if has_suffix and inner:
        inner = inner[:-1]
    pattern = Bounded(
        prefix=parts[0] if has_prefix else None,
        suffix=parts[-1] if has_suffix else None,
        needles=tuple(needle for needle in inner if needle),
    )
    return Rule(kind=kind, length=utf8_len(value), pattern=pattern, source=value)


__all__ = [
    "RuleKind",
    "Equals",
    "Bounded",
    "Pattern",
    "Rule",
    "utf8_len",
    "split_pattern",
    "compile_rule",
]
