# src/phosys_parser/loader/markers.py

"""
Block marker recognition for PHOSYS documents.

A block is delimited by a pair of marker lines:

    ===Meta Start===
    ...
    ===Meta End===

Everything here is pure string inspection over a single, already
normalized line (tabs removed, no trailing newline).
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional, Tuple

MARKER_FENCE = "==="
START_SUFFIX = " Start"
END_SUFFIX = " End"
LEAF_SEPARATOR = ":"

_START_RE = re.compile(r"===(?P<name>.+) Start===")
_END_RE = re.compile(r"===(?P<name>.+) End===")


class LineKind(str, Enum):
    """Classification of a single document line."""

    BLOCK_START = "block_start"
    BLOCK_END = "block_end"
    LEAF = "leaf"
    NAMELESS = "nameless"
    BLANK = "blank"


def is_block_start(line: str) -> bool:
    """Return True if ``line`` is exactly ``===<Name> Start===``."""
    return _START_RE.fullmatch(line) is not None


def is_block_end(line: str) -> bool:
    """Return True if ``line`` is exactly ``===<Name> End===``."""
    return _END_RE.fullmatch(line) is not None


def marker_name(line: str) -> str:
    """
    Extract ``<Name>`` from a start or end marker line.

    The name is returned verbatim (case-sensitive, not trimmed).

    Raises:
        ValueError: if ``line`` is not a marker line.
    """
    match = _START_RE.fullmatch(line) or _END_RE.fullmatch(line)
    if match is None:
        raise ValueError(f"Not a block marker line: {line!r}")
    return match.group("name")


def closes(line: str, expected_name: str) -> bool:
    """
    Return True if ``line`` is the end marker for ``expected_name``.

    An end marker for any other name is not a terminator.
    """
    match = _END_RE.fullmatch(line)
    return match is not None and match.group("name") == expected_name


def is_leaf_line(line: str) -> bool:
    """A named leaf line contains exactly one separator."""
    return line.count(LEAF_SEPARATOR) == 1


def split_leaf(line: str) -> Optional[Tuple[str, str]]:
    """
    Split a named leaf line into ``(name, value)``.

    Returns None for lines with zero or two-or-more separators; values
    containing ``:`` are a known limitation of the format.
    """
    if not is_leaf_line(line):
        return None
    name, value = line.split(LEAF_SEPARATOR)
    return name, value


def classify_line(line: str) -> LineKind:
    """
    Classify a line the way the tree builder sees it.

    Start markers win over leaf syntax. End markers are reported as
    BLOCK_END here; whether one actually closes a block depends on the
    block being built.
    """
    if not line:
        return LineKind.BLANK
    if is_block_start(line):
        return LineKind.BLOCK_START
    if is_block_end(line):
        return LineKind.BLOCK_END
    if is_leaf_line(line):
        return LineKind.LEAF
    return LineKind.NAMELESS


def start_marker(name: str) -> str:
    """Build the start marker line for ``name``."""
    return f"{MARKER_FENCE}{name}{START_SUFFIX}{MARKER_FENCE}"


def end_marker(name: str) -> str:
    """Build the end marker line for ``name``."""
    return f"{MARKER_FENCE}{name}{END_SUFFIX}{MARKER_FENCE}"
