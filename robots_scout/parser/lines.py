# File: robots_scout/parser/lines.py
"""robots_scout.parser.lines: Приведение входных данных robots.txt к списку строк.

Accepts whatever a caller is likely to hold: raw bytes of a downloaded
file, an already decoded string, an open file object (binary or text) or
an iterable of lines. Undecodable bytes are replaced, never raised.
"""

from __future__ import annotations

from typing import IO, Iterable, List, Union

_BOM_BYTES = b"\xef\xbb\xbf"
_BOM_TEXT = "\ufeff"

Source = Union[bytes, bytearray, str, IO[bytes], IO[str], Iterable[str]]


def decode(data: Union[bytes, bytearray]) -> str:
    """Decode UTF-8, skipping a leading byte order mark."""
    data = bytes(data)
    if data.startswith(_BOM_BYTES):
        data = data[len(_BOM_BYTES):]
    return data.decode("utf-8", errors="replace")


def _as_text(line: Union[bytes, bytearray, str]) -> str:
    if isinstance(line, (bytes, bytearray)):
        return bytes(line).decode("utf-8", errors="replace")
    return line


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only, dropping one trailing ``\\r`` per line.

    Other characters ``str.splitlines`` treats as breaks (``\\x0c``,
    ``\\u2028`` ...) stay part of the line.
    """
    lines = [_strip_terminator(line) for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_lines(source: Source) -> List[str]:
    """Return the lines of *source* with line terminators removed."""
    if hasattr(source, "read"):
        source = source.read()  # type: ignore[union-attr]

    if isinstance(source, (bytes, bytearray)):
        text = decode(source)
    elif isinstance(source, str):
        text = source
    else:
        lines = [_strip_terminator(_as_text(line)) for line in source]
        if lines and lines[0].startswith(_BOM_TEXT):
            lines[0] = lines[0][len(_BOM_TEXT):]
        return lines

    if text.startswith(_BOM_TEXT):
        text = text[len(_BOM_TEXT):]
    return split_lines(text)


__all__ = ["Source", "decode", "read_lines", "split_lines"]
