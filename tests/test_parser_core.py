# tests/test_parser_core.py

from __future__ import annotations

import pytest

from phosys_parser.config import PPConfig
from phosys_parser.core import DiagnosticKind, NotAValidDocumentError
from phosys_parser.parser_core import PhosysParser
from phosys_parser.utils import mock_file_path


def test_run_clean_document() -> None:
    parser = PhosysParser()
    result = parser.run(mock_file_path("testlang.language"))

    assert result.ok
    assert result.tree.name == "PHOSYS"
    assert parser.result is result
    assert parser.text.startswith("===PHOSYS Start===")


def test_run_collects_diagnostics() -> None:
    result = PhosysParser().run(mock_file_path("unclosed.language"))

    assert not result.ok
    assert [(d.kind, d.block_name, d.lineno) for d in result.diagnostics] == [
        (DiagnosticKind.UNCLOSED_BLOCK, "Orthography", 5)
    ]


def test_run_rejects_invalid_document() -> None:
    with pytest.raises(NotAValidDocumentError):
        PhosysParser().run(mock_file_path("not_phosys.language"))


def test_root_name_from_config() -> None:
    cfg = PPConfig({"parser": {"root_name": "Other"}})
    parser = PhosysParser(config=cfg)
    assert parser.root_name == "Other"

    with pytest.raises(NotAValidDocumentError):
        parser.parse_text("===PHOSYS Start===\n===PHOSYS End===")

    result = parser.parse_text("===Other Start===\nk:v\n===Other End===")
    assert result.tree.get_leaf("k").value == "v"


def test_empty_root_name_accepts_any_wrapper() -> None:
    parser = PhosysParser(config=PPConfig({"parser": {"root_name": ""}}))
    assert parser.root_name is None
    assert parser.parse_text("===Anything Start===\n===Anything End===").tree.name == "Anything"


def test_explicit_arguments_override_config() -> None:
    cfg = PPConfig({"parser": {"root_name": "PHOSYS", "depth_aware": False}})
    parser = PhosysParser(config=cfg, root_name="R", depth_aware=True)
    assert parser.root_name == "R"
    assert parser.depth_aware is True

    text = (
        "===R Start===\n"
        "===A Start===\n===A Start===\n===A End===\n===A End===\n"
        "===R End==="
    )
    result = parser.parse_text(text)
    assert result.ok
    assert result.tree.get_container("A").get_container("A").children == ()
