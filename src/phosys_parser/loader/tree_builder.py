# src/phosys_parser/loader/tree_builder.py

"""
Recursive-descent tree builder for PHOSYS documents.

    text -> lines -> Container(root)

The first line must open the top-level wrapper block. Every following
line is classified as a nested block start, a ``name:value`` leaf, a
nameless leaf, or a blank line (skipped).

Closing markers are matched by name only: a nested block ends at the
first downstream ``===<Name> End===`` with the same name, regardless of
nesting depth. A closer for some other name is plain data and ends up as
a nameless leaf. Legacy documents depend on this, so balanced matching is
only available through the opt-in ``depth_aware`` flag.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from phosys_parser.core.diagnostics import (
    CollectingSink,
    Diagnostic,
    DiagnosticKind,
    DiagnosticsSink,
)
from phosys_parser.core.exceptions import NotAValidDocumentError

from .markers import closes, is_block_start, marker_name, split_leaf
from .nodes import Container, Leaf, Node

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass
class ParseResult:
    """A parsed tree together with the diagnostics reported while building it."""

    tree: Container
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics


def split_lines(text: str) -> List[str]:
    """
    Normalize raw document text and split it into lines.

    Literal tab characters are removed everywhere (indentation is not
    significant), and a UTF-8 BOM at the very start is dropped.
    """
    text = text.replace("\t", "")
    if text.startswith("\ufeff"):
        text = text[1:]
    return _LINE_BREAK_RE.split(text)


def parse_document(
    text: str,
    sink: Optional[DiagnosticsSink] = None,
    *,
    root_name: Optional[str] = None,
    depth_aware: bool = False,
) -> Container:
    """
    Parse a whole document into its root Container.

    Args:
        text: Full document text.
        sink: Receives structural diagnostics. A private CollectingSink is
            used when omitted.
        root_name: If given, the first line must open a block with exactly
            this name (e.g. "PHOSYS").
        depth_aware: Match closing markers by nesting depth instead of by
            first name match.

    Raises:
        NotAValidDocumentError: if the first line is not a block start
            marker (or names the wrong wrapper).
    """
    lines = split_lines(text)
    first = lines[0] if lines else ""

    if not is_block_start(first):
        raise NotAValidDocumentError(
            f"Line 1: expected a block start marker, got {first!r}"
        )

    name = marker_name(first)
    if root_name is not None and name != root_name:
        raise NotAValidDocumentError(
            f"Line 1: expected top-level block {root_name!r}, got {name!r}"
        )

    if sink is None:
        sink = CollectingSink()

    root, end = _build(lines, 0, len(lines), sink, depth_aware)

    if end >= len(lines):
        sink.report(
            Diagnostic(
                kind=DiagnosticKind.UNCLOSED_BLOCK,
                message=f"Top-level block {name!r} on line 1 is not closed",
                block_name=name,
                lineno=1,
            )
        )
    else:
        _check_trailing(lines, end + 1, name, sink)

    return root


def parse_with_diagnostics(text: str, **kwargs) -> ParseResult:
    """
    Parse ``text`` and return the tree alongside its diagnostics.

    Keyword arguments are forwarded to parse_document().
    """
    sink = CollectingSink()
    tree = parse_document(text, sink, **kwargs)
    return ParseResult(tree=tree, diagnostics=list(sink.diagnostics))


def build_block(
    lines: List[str],
    start_index: int = 0,
    stop: Optional[int] = None,
    sink: Optional[DiagnosticsSink] = None,
    *,
    depth_aware: bool = False,
) -> Container:
    """
    Build one Container from ``lines[start_index:stop]``.

    ``lines[start_index]`` must be a block start marker. The scan ends at
    ``stop`` (default: end of input) or at the block's own closing marker,
    whichever comes first.
    """
    if stop is None:
        stop = len(lines)
    if sink is None:
        sink = CollectingSink()
    container, _ = _build(lines, start_index, stop, sink, depth_aware)
    return container


def extract_block(
    lines: List[str],
    start_index: int,
    stop: Optional[int] = None,
    sink: Optional[DiagnosticsSink] = None,
    *,
    depth_aware: bool = False,
) -> Tuple[Optional[Container], int]:
    """
    Locate the closer for the block opened at ``start_index`` and build it.

    Returns:
        ``(container, next_index)`` where ``next_index`` is just past the
        closing marker. If no closer exists before ``stop``, an
        UNCLOSED_BLOCK diagnostic is reported and ``(None, start_index + 1)``
        is returned so the caller resumes right after the start marker.
    """
    if stop is None:
        stop = len(lines)
    if sink is None:
        sink = CollectingSink()

    closer = _find_closer(lines, start_index, stop, depth_aware)
    if closer is None:
        _report_unclosed(lines, start_index, sink)
        return None, start_index + 1

    child, _ = _build(lines, start_index, closer, sink, depth_aware)
    return child, closer + 1


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

@dataclass
class _Frame:
    """A block being built: its name, line range, cursor and children so far."""

    name: str
    stop: int
    i: int
    children: List[Node] = field(default_factory=list)


def _find_closer(
    lines: List[str], start: int, stop: int, depth_aware: bool
) -> Optional[int]:
    """Index of the line closing the block opened at ``start``, or None."""
    name = marker_name(lines[start])
    depth = 0

    for j in range(start + 1, stop):
        line = lines[j]

        if depth_aware and is_block_start(line) and marker_name(line) == name:
            depth += 1
            continue

        if closes(line, name):
            if depth:
                depth -= 1
                continue
            return j

    return None


def _report_unclosed(lines: List[str], start: int, sink: DiagnosticsSink) -> None:
    name = marker_name(lines[start])
    lineno = start + 1
    sink.report(
        Diagnostic(
            kind=DiagnosticKind.UNCLOSED_BLOCK,
            message=f"Block {name!r} on line {lineno} is not closed",
            block_name=name,
            lineno=lineno,
        )
    )


def _build(
    lines: List[str],
    start: int,
    stop: int,
    sink: DiagnosticsSink,
    depth_aware: bool,
) -> Tuple[Container, int]:
    """
    Build the block opened at ``start``.

    Nested blocks are walked with an explicit stack of frames. A nested
    frame covers the lines up to (not including) its closer; the parent
    resumes just past that closer.

    Returns the container and the index of its own closing marker, or
    ``stop`` if the range ran out first.
    """
    stack = [_Frame(marker_name(lines[start]), stop, start + 1)]

    while True:
        frame = stack[-1]
        end: Optional[int] = None

        while frame.i < frame.stop:
            line = lines[frame.i]

            if is_block_start(line):
                closer = _find_closer(lines, frame.i, frame.stop, depth_aware)
                if closer is None:
                    _report_unclosed(lines, frame.i, sink)
                    frame.i += 1
                    continue
                child = _Frame(marker_name(line), closer, frame.i + 1)
                frame.i = closer + 1
                stack.append(child)
                break

            if closes(line, frame.name):
                end = frame.i
                break

            pair = split_leaf(line)
            if pair is not None:
                frame.children.append(Leaf(*pair))
            elif line:
                # Legacy nameless line: keep the whole line as the value.
                frame.children.append(Leaf("", line))

            frame.i += 1
        else:
            end = frame.stop

        if end is None:
            # A child frame was pushed; build it first.
            continue

        stack.pop()
        container = Container(frame.name, tuple(frame.children))
        if not stack:
            return container, end
        stack[-1].children.append(container)


def _check_trailing(
    lines: List[str], start: int, root_name: str, sink: DiagnosticsSink
) -> None:
    for idx in range(start, len(lines)):
        if lines[idx]:
            lineno = idx + 1
            sink.report(
                Diagnostic(
                    kind=DiagnosticKind.TRAILING_CONTENT,
                    message=(
                        f"Content after the end of top-level block "
                        f"{root_name!r} on line {lineno} is ignored"
                    ),
                    block_name=root_name,
                    lineno=lineno,
                )
            )
            return
