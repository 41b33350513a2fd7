"""
Structural diagnostics produced while building a tree.

The tree builder never logs or aborts on its own. It hands every
structural problem to a sink passed in by the caller; what happens next
(buffering, logging, raising) is the sink's policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Protocol, runtime_checkable

from phosys_parser.core.exceptions import UnclosedBlockError
from phosys_parser.logging import get_logger


class DiagnosticKind(str, Enum):
    UNCLOSED_BLOCK = "unclosed_block"
    TRAILING_CONTENT = "trailing_content"


@dataclass(frozen=True)
class Diagnostic:
    """
    A single structural problem.

    Attributes:
        kind: What went wrong.
        message: Human-readable description.
        block_name: Name of the offending block.
        lineno: 1-based line number in the original document.
    """

    kind: DiagnosticKind
    message: str
    block_name: str
    lineno: int

    def __str__(self) -> str:
        return f"line {self.lineno}: {self.message}"


@runtime_checkable
class DiagnosticsSink(Protocol):
    def report(self, diagnostic: Diagnostic) -> None: ...


@dataclass
class CollectingSink:
    """Buffer diagnostics in memory, in the order they were reported."""

    diagnostics: List[Diagnostic] = field(default_factory=list)

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    @property
    def has_errors(self) -> bool:
        return bool(self.diagnostics)

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]

    def clear(self) -> None:
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)


class LoggingSink:
    """Forward each diagnostic to a logger."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.WARNING):
        if logger is None:
            logger = get_logger("phosys_parser.diagnostics")
        self.logger = logger
        self.level = level

    def report(self, diagnostic: Diagnostic) -> None:
        self.logger.log(
            self.level,
            "[%s] %s (block=%s, line=%d)",
            diagnostic.kind.value,
            diagnostic.message,
            diagnostic.block_name,
            diagnostic.lineno,
        )


class RaisingSink(CollectingSink):
    """
    Abort on unclosed blocks.

    UNCLOSED_BLOCK raises UnclosedBlockError; every other kind is buffered
    like CollectingSink does.
    """

    def report(self, diagnostic: Diagnostic) -> None:
        super().report(diagnostic)
        if diagnostic.kind is DiagnosticKind.UNCLOSED_BLOCK:
            raise UnclosedBlockError(diagnostic.block_name, diagnostic.lineno)


class TeeSink:
    """Fan a diagnostic out to several sinks, in order."""

    def __init__(self, sinks: Iterable[DiagnosticsSink]):
        self.sinks = list(sinks)

    def report(self, diagnostic: Diagnostic) -> None:
        for sink in self.sinks:
            sink.report(diagnostic)
