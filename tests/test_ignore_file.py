# tests/test_ignore_file.py
"""Tests for reading .bazelignore into ignored prefixes."""

import pytest
from pathlib import Path

from buildfind.core.discovery.ignore_file import clean_ignore_entry, load_ignored_prefixes


@pytest.mark.parametrize(
    "bazelignore, expected",
    [
        ("# Ignore these directories\nignored\na/ignored\nb/c/d", ["ignored", "a/ignored", "b/c/d"]),
        (" ", []),
        ("# This is a comment\n# Another comment", []),
        ("ignored\n\na/ignored\n\n# comment\nb/c/d", ["ignored", "a/ignored", "b/c/d"]),
        ("/absolute/path\nignored\n/another/absolute/path", ["ignored"]),
        ("ignored/", ["ignored"]),
        ("  spaced/out  \n\tvendor\t", ["spaced/out", "vendor"]),
        ("a//b\n./c\nd/../e/./f", ["a/b", "c", "e/f"]),
        ("dup\ndup", ["dup", "dup"]),
        ("windows\r\nline\r\nendings\r\n", ["windows", "line", "endings"]),
    ],
    ids=[
        "valid_paths",
        "blank_file",
        "only_comments",
        "empty_lines",
        "absolute_paths",
        "trailing_slash",
        "surrounding_whitespace",
        "path_cleaning",
        "duplicates_kept",
        "crlf",
    ],
)
def test_load_ignored_prefixes(tmp_path: Path, bazelignore: str, expected: list):
    (tmp_path / ".bazelignore").write_text(bazelignore)
    assert load_ignored_prefixes(tmp_path) == expected


def test_missing_file_means_nothing_ignored(tmp_path: Path):
    assert load_ignored_prefixes(tmp_path) == []


def test_unreadable_file_means_nothing_ignored(tmp_path: Path):
    # a directory in place of the file cannot be read as text.
    (tmp_path / ".bazelignore").mkdir()
    assert load_ignored_prefixes(tmp_path) == []


def test_accepts_string_root(tmp_path: Path):
    (tmp_path / ".bazelignore").write_text("third_party\n")
    assert load_ignored_prefixes(str(tmp_path)) == ["third_party"]


class TestCleanIgnoreEntry:
    """Normalization applied to each kept line."""

    def test_strips_trailing_separators(self):
        assert clean_ignore_entry("out/gen///") == "out/gen"

    def test_resolves_dot_segments(self):
        assert clean_ignore_entry("a/./b/../c") == "a/c"

    def test_keeps_leading_parent_references(self):
        assert clean_ignore_entry("../sibling") == "../sibling"


def test_only_newline_separates_entries(tmp_path: Path):
    # form feeds, vertical tabs and unicode separators stay inside the entry.
    (tmp_path / ".bazelignore").write_text("a\x0bb\nc\x1cd\ne f\ng\x85h\n", encoding="utf-8")
    assert load_ignored_prefixes(tmp_path) == ["a\x0bb", "c\x1cd", "e f", "g\x85h"]


def test_undecodable_bytes_survive_loading(tmp_path: Path):
    (tmp_path / ".bazelignore").write_bytes(b"vendor\xff\n")
    assert load_ignored_prefixes(tmp_path) == ["vendor\udcff"]
