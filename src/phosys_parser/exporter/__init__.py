"""
Exporter package.

Re-exports the JSON export entry points used by the CLI.
"""

from __future__ import annotations

from .json_exporter import (
    diagnostics_to_list,
    export_tree_json,
    serialize_tree_to_json_string,
    tree_to_dict,
)

__all__ = [
    "diagnostics_to_list",
    "export_tree_json",
    "serialize_tree_to_json_string",
    "tree_to_dict",
]
