"""
Core error and diagnostics types shared by the loader and its callers.
"""

from .diagnostics import (
    CollectingSink,
    Diagnostic,
    DiagnosticKind,
    DiagnosticsSink,
    LoggingSink,
    RaisingSink,
    TeeSink,
)
from .exceptions import (
    NodeNotFoundError,
    NotAValidDocumentError,
    PhosysFormatError,
    UnclosedBlockError,
)

__all__ = [
    "CollectingSink",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticsSink",
    "LoggingSink",
    "RaisingSink",
    "TeeSink",
    "NodeNotFoundError",
    "NotAValidDocumentError",
    "PhosysFormatError",
    "UnclosedBlockError",
]
