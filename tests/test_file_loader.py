# tests/test_file_loader.py

from __future__ import annotations

from pathlib import Path

import pytest

from phosys_parser.core import CollectingSink, NotAValidDocumentError
from phosys_parser.loader import load_file, parse_file
from phosys_parser.utils import mock_file_path


def test_mock_files_exist() -> None:
    for name in ("testlang.language", "unclosed.language", "not_phosys.language"):
        path = mock_file_path(name)
        assert path.is_file(), f"Expected sample file at: {path}"


def test_load_file_reads_text() -> None:
    text = load_file(mock_file_path("testlang.language"))
    assert text.startswith("===PHOSYS Start===")


def test_load_file_missing_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_file(tmp_path / "missing.language")


def test_parse_file_testlang() -> None:
    sink = CollectingSink()
    root = parse_file(mock_file_path("testlang.language"), sink, root_name="PHOSYS")

    assert len(sink) == 0
    assert root.name == "PHOSYS"

    meta = root.get_container("Meta")
    assert meta.get_leaf("name").value == "Testlang"
    assert meta.get_leaf("autonym").value == "Tɛstlæŋ"
    assert meta.get_leaf("timeCreated").value == "1699999999999"
    assert meta.get_leaf("utilsVersion").value == "1.2.0"

    system = root.get_container("Phonology").get_container("PhonoSystem")
    consonants = system.get_container("Consonants")
    assert [leaf.value for leaf in consonants.leaves] == ["p", "t", "k"]
    assert all(leaf.is_nameless for leaf in consonants.leaves)

    words = root.get_container("Lexicon").find_containers("Word")
    assert [(w.value_of("wordname"), w.value_of("meaning")) for w in words] == [
        ("tak", "stone"),
        ("pet", "water"),
    ]


def test_parse_file_unclosed_block() -> None:
    sink = CollectingSink()
    root = parse_file(mock_file_path("unclosed.language"), sink)

    assert [d.block_name for d in sink] == ["Orthography"]
    assert sink.diagnostics[0].lineno == 5
    assert root.find_containers("Orthography") == []
    assert root.get_container("Meta").value_of("name") == "Brokenlang"
    # The orphaned lines are read back into the enclosing block.
    assert root.get_leaf("a").value == "a"
    assert root.get_leaf("b").value == "b"


def test_parse_file_not_phosys() -> None:
    with pytest.raises(NotAValidDocumentError):
        parse_file(mock_file_path("not_phosys.language"))


def test_parse_file_accepts_utf8_with_bom(tmp_path: Path) -> None:
    path = tmp_path / "bom.language"
    path.write_text("\ufeff===PHOSYS Start===\nname:x\n===PHOSYS End===\n", encoding="utf-8")
    root = parse_file(path, root_name="PHOSYS")
    assert root.get_leaf("name").value == "x"
