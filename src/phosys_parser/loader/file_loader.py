# src/phosys_parser/loader/file_loader.py

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from phosys_parser.core.diagnostics import DiagnosticsSink
from phosys_parser.logging import get_logger

from .nodes import Container
from .tree_builder import parse_document

log = get_logger(__name__)


def load_file(path: Union[str, Path]) -> str:
    """
    Read a ``.language`` / PHOSYS file into a string.

    Raises:
        FileNotFoundError: if ``path`` is not an existing file.
    """
    file_path = Path(path)

    if not file_path.is_file():
        log.error("Input file does not exist: %s", file_path)
        raise FileNotFoundError(f"PHOSYS file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        text = f.read()

    log.debug("Loaded file: %s (%d chars)", file_path, len(text))
    return text


def parse_file(
    path: Union[str, Path],
    sink: Optional[DiagnosticsSink] = None,
    **kwargs,
) -> Container:
    """
    Load and parse a file in one step.

    Keyword arguments are forwarded to parse_document().
    """
    return parse_document(load_file(path), sink, **kwargs)
