"""
phosys_parser: reader for the marker-delimited PHOSYS (``.language``) format.

    from phosys_parser import parse_document

    root = parse_document(text)
    meta = root.get_container("Meta")
    print(meta.get_leaf("name").value)
"""

from phosys_parser.core import (
    CollectingSink,
    Diagnostic,
    DiagnosticKind,
    LoggingSink,
    NodeNotFoundError,
    NotAValidDocumentError,
    PhosysFormatError,
    RaisingSink,
    UnclosedBlockError,
)
from phosys_parser.loader import (
    Container,
    Leaf,
    ParseResult,
    get_container,
    get_leaf,
    load_file,
    parse_document,
    parse_file,
    parse_with_diagnostics,
)

__version__ = "0.1.0"

__all__ = [
    "CollectingSink",
    "Diagnostic",
    "DiagnosticKind",
    "LoggingSink",
    "NodeNotFoundError",
    "NotAValidDocumentError",
    "PhosysFormatError",
    "RaisingSink",
    "UnclosedBlockError",
    "Container",
    "Leaf",
    "ParseResult",
    "get_container",
    "get_leaf",
    "load_file",
    "parse_document",
    "parse_file",
    "parse_with_diagnostics",
]
