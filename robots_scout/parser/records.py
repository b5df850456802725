# File: robots_scout/parser/records.py
"""robots_scout.parser.records: Разбор одной строки robots.txt в пару (поле, значение)."""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple, Optional


class Record(NamedTuple):
    """One ``field: value`` line with a normalized field name."""

    field: str
    value: str


def clean_field(text: str) -> str:
    return text.lower().strip()


def clean_value(text: str) -> str:
    """Отрезает комментарий (#...) и пробелы по краям."""
    text = text.split("#", 1)[0]
    return text.strip()


def split_record(line: str) -> Optional[Record]:
    """Return the record of *line* or ``None`` if the line has no colon."""
    field, sep, value = line.partition(":")
    if not sep:
        return None
    return Record(clean_field(field), clean_value(value))


def iter_records(lines: Iterable[str]) -> Iterator[Record]:
    for line in lines:
        record = split_record(line)
        if record is not None:
            yield record


__all__ = ["Record", "clean_field", "clean_value", "split_record", "iter_records"]
