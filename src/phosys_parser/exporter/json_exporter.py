"""
json_exporter.py
Structured JSON exporter for parsed PHOSYS trees.

This exporter:
- Converts Leaf / Container nodes to plain dictionaries
- Preserves child order and duplicate names
- Never writes PHOSYS marker text back out
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from phosys_parser.core.diagnostics import Diagnostic
from phosys_parser.loader.nodes import Container, Leaf, Node
from phosys_parser.logging import get_logger

log = get_logger("json_exporter")


def tree_to_dict(node: Node) -> Dict[str, Any]:
    """
    Recursively convert a node into JSON-compatible structures.

    Rules:
    - Leaf -> {"name", "value"}
    - Container -> {"name", "children": [...]}
    """
    if isinstance(node, Leaf):
        return {"name": node.name, "value": node.value}

    if isinstance(node, Container):
        return {
            "name": node.name,
            "children": [tree_to_dict(child) for child in node.children],
        }

    raise TypeError(f"Not a tree node: {node!r}")


def diagnostics_to_list(diagnostics: List[Diagnostic]) -> List[Dict[str, Any]]:
    return [
        {
            "kind": d.kind.value,
            "message": d.message,
            "block": d.block_name,
            "line": d.lineno,
        }
        for d in diagnostics
    ]


def serialize_tree_to_json_string(tree: Container, indent: int | None = 2) -> str:
    return json.dumps(tree_to_dict(tree), indent=indent, ensure_ascii=False)


def export_tree_json(tree: Container, output_path: str | Path, indent: int = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting tree JSON to: %s (root=%s, children=%d)",
        output_path,
        tree.name,
        len(tree.children),
    )

    json_str = serialize_tree_to_json_string(tree, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
