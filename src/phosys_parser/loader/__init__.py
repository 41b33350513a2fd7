# src/phosys_parser/loader/__init__.py

"""
Public interface for the PHOSYS loader stack.

Intended usage from other parts of the project and tests:

    from phosys_parser.loader import (
        Leaf,
        Container,
        parse_document,
        get_leaf,
        get_container,
    )
"""

from __future__ import annotations

from .markers import (
    LineKind,
    classify_line,
    closes,
    end_marker,
    is_block_end,
    is_block_start,
    is_leaf_line,
    marker_name,
    split_leaf,
    start_marker,
)
from .nodes import Container, Leaf, Node, get_container, get_leaf
from .tree_builder import (
    ParseResult,
    build_block,
    extract_block,
    parse_document,
    parse_with_diagnostics,
    split_lines,
)
from .file_loader import load_file, parse_file

__all__ = [
    "LineKind",
    "classify_line",
    "closes",
    "end_marker",
    "is_block_end",
    "is_block_start",
    "is_leaf_line",
    "marker_name",
    "split_leaf",
    "start_marker",
    "Container",
    "Leaf",
    "Node",
    "get_container",
    "get_leaf",
    "ParseResult",
    "build_block",
    "extract_block",
    "parse_document",
    "parse_with_diagnostics",
    "split_lines",
    "load_file",
    "parse_file",
]
