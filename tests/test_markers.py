# tests/test_markers.py

from __future__ import annotations

import pytest

from phosys_parser.loader import (
    LineKind,
    classify_line,
    closes,
    end_marker,
    is_block_end,
    is_block_start,
    marker_name,
    split_leaf,
    start_marker,
)


def test_is_block_start_exact_form() -> None:
    assert is_block_start("===PHOSYS Start===")
    assert is_block_start("===Word List Start===")


@pytest.mark.parametrize(
    "line",
    [
        "===PHOSYS End===",
        " ===PHOSYS Start===",
        "===PHOSYS Start=== ",
        "===PHOSYS start===",
        "==PHOSYS Start===",
        "=== Start===",
        "PHOSYS Start",
        "",
    ],
)
def test_is_block_start_rejects_near_misses(line: str) -> None:
    assert not is_block_start(line)


def test_is_block_end_exact_form() -> None:
    assert is_block_end("===Meta End===")
    assert not is_block_end("===Meta Start===")
    assert not is_block_end("===Meta End=== ")
    assert not is_block_end("===Meta END===")


def test_marker_name_from_start_and_end() -> None:
    assert marker_name("===Meta Start===") == "Meta"
    assert marker_name("===Meta End===") == "Meta"
    assert marker_name("===Word List Start===") == "Word List"


def test_marker_name_is_case_sensitive_and_untrimmed() -> None:
    assert marker_name("===meta Start===") == "meta"
    assert marker_name("=== Meta Start===") == " Meta"


def test_marker_name_rejects_non_marker() -> None:
    with pytest.raises(ValueError):
        marker_name("name:Testlang")


def test_closes_requires_end_marker_with_same_name() -> None:
    assert closes("===A End===", "A")
    assert not closes("===B End===", "A")
    assert not closes("===A Start===", "A")
    assert not closes("a:b", "A")


def test_split_leaf_exactly_one_separator() -> None:
    assert split_leaf("name:Testlang") == ("name", "Testlang")
    assert split_leaf("name:") == ("name", "")
    assert split_leaf("no separator") is None
    assert split_leaf("a:b:c") is None


def test_classify_line() -> None:
    assert classify_line("") is LineKind.BLANK
    assert classify_line("===A Start===") is LineKind.BLOCK_START
    assert classify_line("===A End===") is LineKind.BLOCK_END
    assert classify_line("id:12345") is LineKind.LEAF
    assert classify_line("p") is LineKind.NAMELESS
    assert classify_line("http://x:80") is LineKind.NAMELESS


def test_marker_builders_are_recognized() -> None:
    assert is_block_start(start_marker("Lexicon"))
    assert closes(end_marker("Lexicon"), "Lexicon")
