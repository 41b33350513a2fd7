# tests/test_logger.py

from __future__ import annotations

import logging

from phosys_parser.logging import get_logger, set_debug


def test_module_loggers_nest_under_base_logger() -> None:
    assert get_logger("parser_core").name == "phosys_parser.parser_core"
    assert get_logger("phosys_parser.loader").name == "phosys_parser.loader"
    assert get_logger().name == "phosys_parser"


def test_set_debug_raises_and_restores_levels() -> None:
    log = get_logger("parser_core")
    try:
        set_debug(True)
        assert log.level == logging.DEBUG
        assert get_logger().level == logging.DEBUG
    finally:
        set_debug(False)
    assert log.level == logging.INFO
