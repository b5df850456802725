# File: tests/conftest.py
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

import pytest

TESTDATA = Path(__file__).parent / "testdata"

_CASE_RE = re.compile(r"^#\s*(allow|disallow)\s*,\s*([^,]*?)\s*,\s*(.*?)\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class Case:
    user_agent: str
    path: str
    allow: bool

    def __str__(self) -> str:
        return f"user-agent={self.user_agent!r}, path={self.path!r}, allow={self.allow}"


def load_testdata(path: Path) -> Tuple[List[Case], bytes]:
    """
    Split a testdata file into its header cases and the robots.txt body.
    Header lines look like ``# allow, <user-agent>, <path>``.
    """
    cases: List[Case] = []
    lines = path.read_bytes().splitlines(keepends=True)
    index = 0
    while index < len(lines) and lines[index].startswith(b"#"):
        match = _CASE_RE.match(lines[index].decode("utf-8"))
        if match:
            cases.append(
                Case(
                    user_agent=match.group(2),
                    path=match.group(3),
                    allow=match.group(1).lower() == "allow",
                )
            )
        index += 1
    return cases, b"".join(lines[index:])


@pytest.fixture()
def write_robots(tmp_path):
    """Write robots.txt content to a temporary file and return its path."""

    def _write(content, name: str = "robots.txt") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
        return path

    return _write


@pytest.fixture()
def sample_robots() -> str:
    return (
        "User-agent: googlebot\n"
        "Disallow: /private/\n"
        "Allow: /private/public.html\n"
        "Crawl-delay: 5\n"
        "\n"
        "User-agent: *\n"
        "Disallow: /tmp/\n"
    )
