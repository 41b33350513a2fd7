"""
parser_core.py
Central parsing engine with full logging integration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from phosys_parser.config import get_config
from phosys_parser.core.diagnostics import CollectingSink, LoggingSink, TeeSink
from phosys_parser.loader.file_loader import load_file
from phosys_parser.loader.tree_builder import ParseResult, parse_document
from phosys_parser.logging import get_logger


class PhosysParser:
    """
    High-level parser:
      - loads file
      - builds tree (root name and matching mode from config)
      - collects and logs structural diagnostics
    """

    def __init__(self, config=None, *, root_name: Optional[str] = None,
                 depth_aware: Optional[bool] = None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")

        # Explicit arguments win over config values.
        self.root_name = root_name if root_name is not None else self.cfg.root_name
        self.depth_aware = (
            depth_aware if depth_aware is not None else self.cfg.depth_aware
        )

        self.text: str = ""
        self.result: Optional[ParseResult] = None

        self.log.debug(
            "Parser engine initialized (root_name=%s, depth_aware=%s).",
            self.root_name,
            self.depth_aware,
        )

    # ---------------------------------------------------------
    # Load file
    # ---------------------------------------------------------
    def load_file(self, path: Union[str, Path]) -> str:
        """Read a document from disk."""
        self.log.info("Reading PHOSYS input: %s", path)
        try:
            self.text = load_file(path)
        except Exception:
            self.log.exception("Reading input failed.")
            raise
        return self.text

    # ---------------------------------------------------------
    # Parse
    # ---------------------------------------------------------
    def parse_text(self, text: str) -> ParseResult:
        """Parse an in-memory document."""
        collected = CollectingSink()
        sink = TeeSink([collected, LoggingSink(self.log)])

        try:
            tree = parse_document(
                text,
                sink,
                root_name=self.root_name,
                depth_aware=self.depth_aware,
            )
        except Exception:
            self.log.exception("Parse failed.")
            raise

        self.result = ParseResult(tree=tree, diagnostics=list(collected.diagnostics))

        if self.cfg.debug:
            self.log.debug(
                "Tree %r: %d nodes", tree.name, sum(1 for _ in tree.iter_subtree())
            )
        self.log.info(
            "Parsed block %r with %d diagnostic(s).",
            tree.name,
            len(self.result.diagnostics),
        )
        return self.result

    def run(self, input_path: Union[str, Path]) -> ParseResult:
        """
        Full parse sequence.
        Returns: ParseResult
        """
        text = self.load_file(input_path)
        return self.parse_text(text)
