# tests/test_json_exporter.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from phosys_parser.core import CollectingSink
from phosys_parser.exporter import (
    diagnostics_to_list,
    export_tree_json,
    serialize_tree_to_json_string,
    tree_to_dict,
)
from phosys_parser.loader import Container, Leaf, parse_document


def test_tree_to_dict() -> None:
    tree = Container("PHOSYS", (Leaf("name", "Testlang"), Container("Meta", (Leaf("", "x"),))))
    assert tree_to_dict(tree) == {
        "name": "PHOSYS",
        "children": [
            {"name": "name", "value": "Testlang"},
            {"name": "Meta", "children": [{"name": "", "value": "x"}]},
        ],
    }


def test_tree_to_dict_rejects_other_objects() -> None:
    with pytest.raises(TypeError):
        tree_to_dict({"name": "x"})  # type: ignore[arg-type]


def test_serialize_keeps_unicode() -> None:
    tree = Container("R", (Leaf("autonym", "Tɛstlæŋ"),))
    assert "Tɛstlæŋ" in serialize_tree_to_json_string(tree)


def test_export_tree_json_creates_parent_dirs(tmp_path: Path) -> None:
    tree = parse_document("===R Start===\nk:v\n===R End===")
    out = tmp_path / "nested" / "tree.json"

    export_tree_json(tree, out)

    assert json.loads(out.read_text(encoding="utf-8")) == tree_to_dict(tree)


def test_diagnostics_to_list() -> None:
    sink = CollectingSink()
    parse_document("===R Start===\n===A Start===\n===R End===", sink)
    assert diagnostics_to_list(sink.diagnostics) == [
        {
            "kind": "unclosed_block",
            "message": "Block 'A' on line 2 is not closed",
            "block": "A",
            "line": 2,
        }
    ]
