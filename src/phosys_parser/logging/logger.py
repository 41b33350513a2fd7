"""
Centralized logging configuration for the PHOSYS parser.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Master log file (default: ``logs/phosys_parser.log``) plus optional
  per-module logs.
* Console logging that respects the configured debug flag.
* Optional log rotation controlled by ``config/phosys_parser.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict

from phosys_parser.config import get_config

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_LOG_DIR = PROJECT_ROOT / "logs"
BASE_LOGGER_NAME = "phosys_parser"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Cache so handlers are only created once per module
_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_log_dir: Path = DEFAULT_LOG_DIR
_master_log_name: str = "phosys_parser.log"
_rotate_logs: bool = False
_module_files: bool = True


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _ensure_log_dir() -> Path:
    """Resolve and create the log directory from configuration."""
    global _log_dir
    cfg = get_config()

    log_dir_cfg = cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs"
    log_dir = Path(log_dir_cfg)
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    _log_dir = log_dir
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if _rotate_logs:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level, _master_log_name
    global _rotate_logs, _module_files

    if _base_configured:
        return logging.getLogger(BASE_LOGGER_NAME)

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _module_files = bool(cfg.logging.get("module_files", True))
    _master_log_name = cfg.logging.get("file", "phosys_parser.log")

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    debug_enabled = bool(getattr(cfg, "debug", False))

    _effective_level = logging.DEBUG if debug_enabled else base_level

    log_dir = _ensure_log_dir()
    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    # Master log handler
    master_path = log_dir / _master_log_name
    base_logger.addHandler(_build_file_handler(master_path, _effective_level))

    # Console handler
    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _qualify(name: str) -> str:
    """Place bare module names under the base logger so they share handlers."""
    if name == BASE_LOGGER_NAME or name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def _module_handler_exists(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    log_dir = _ensure_log_dir()
    filename = f"{module_name.replace('.', '_')}.log"
    path = log_dir / filename

    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    * Module loggers inherit the base console + master log handlers.
    * Each module may also gain its own file handler: ``logs/<module>.log``.
    * The debug flag in ``config/phosys_parser.yml`` forces DEBUG level output.
    """

    base_logger = _configure_base_logger()
    logger_name = _qualify(name or BASE_LOGGER_NAME)
    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)

    if logger_name != base_logger.name:
        if _module_files and not _module_handler_exists(logger):
            _attach_module_handler(logger, logger_name)
        logger.propagate = True
    else:
        # Base logger already owns the master + console handlers
        logger.propagate = False

    _logger_cache[logger_name] = logger
    return logger


def set_debug(enabled: bool = True) -> None:
    """Raise (or restore) the level of every logger handed out so far."""
    global _effective_level

    base_logger = _configure_base_logger()
    cfg = get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    _effective_level = logging.DEBUG if enabled else getattr(logging, level_name, logging.INFO)

    for logger in [base_logger, *_logger_cache.values()]:
        logger.setLevel(_effective_level)
        for handler in logger.handlers:
            handler.setLevel(_effective_level)

