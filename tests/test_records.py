# File: tests/test_records.py
import pytest

from robots_scout.parser.lines import read_lines, split_lines
from robots_scout.parser.records import Record, iter_records, split_record


@pytest.mark.parametrize(
    "line,expected",
    [
        ("User-agent: Googlebot", Record("user-agent", "Googlebot")),
        ("  DISALLOW :  /private/  ", Record("disallow", "/private/")),
        ("Allow: /a # trailing comment", Record("allow", "/a")),
        ("Disallow:/x#y", Record("disallow", "/x")),
        ("Disallow:", Record("disallow", "")),
        ("Sitemap: http://example.com/sitemap.xml", Record("sitemap", "http://example.com/sitemap.xml")),
        ("# Disallow: /commented", Record("# disallow", "/commented")),
        (":", Record("", "")),
    ],
)
def test_split_record(line, expected):
    assert split_record(line) == expected


@pytest.mark.parametrize("line", ["", "   ", "no colon here", "# just a comment"])
def test_split_record_ignores_lines_without_colon(line):
    assert split_record(line) is None


def test_value_keeps_colons_after_first():
    # only the first colon separates field and value
    assert split_record("Allow: /a:b") == Record("allow", "/a:b")


def test_iter_records_skips_ignored():
    lines = ["User-agent: *", "garbage", "", "Disallow: /"]
    assert list(iter_records(lines)) == [Record("user-agent", "*"), Record("disallow", "/")]


def test_read_lines_bytes_with_bom():
    data = b"\xef\xbb\xbfUser-agent: *\r\nDisallow: /\r\n"
    assert read_lines(data) == ["User-agent: *", "Disallow: /"]


def test_read_lines_bom_only_at_start():
    text = "\ufeffUser-agent: *\n\ufeffDisallow: /"
    assert read_lines(text) == ["User-agent: *", "\ufeffDisallow: /"]


def test_read_lines_invalid_utf8_is_replaced():
    lines = read_lines(b"User-agent: \xff\xfe\nDisallow: /")
    assert lines[1] == "Disallow: /"
    assert lines[0].startswith("User-agent: ")


def test_read_lines_file_objects(tmp_path):
    path = tmp_path / "robots.txt"
    path.write_bytes(b"\xef\xbb\xbfUser-agent: *\nDisallow: /x\n")
    with path.open("rb") as binary:
        assert read_lines(binary) == ["User-agent: *", "Disallow: /x"]
    with path.open("r", encoding="utf-8") as text:
        assert read_lines(text) == ["User-agent: *", "Disallow: /x"]


def test_read_lines_iterable_of_lines():
    lines = [b"\xef\xbb\xbfUser-agent: *\n", "Disallow: /x\r\n"]
    assert read_lines(lines) == ["User-agent: *", "Disallow: /x"]


@pytest.mark.parametrize("char", ["\u2028", "\u2029", "\x0b", "\x0c", "\x1c", "\x85"])
def test_split_lines_only_breaks_on_newline(char):
    text = f"User-agent: *\r\nDisallow: /a{char}b\n"
    assert split_lines(text) == ["User-agent: *", f"Disallow: /a{char}b"]


def test_split_lines_drops_one_carriage_return():
    assert split_lines("a\r\r\nb\rc\n\n") == ["a\r", "b\rc", ""]


def test_read_lines_iterable_keeps_unicode_separators():
    lines = ["User-agent: *\n", "Disallow: /a\u2028b\r\n"]
    assert read_lines(lines) == ["User-agent: *", "Disallow: /a\u2028b"]
