# src/phosys_parser/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at:
#   <project_root>/src/phosys_parser/utils/pathing.py
#
# Path(__file__).resolve().parents gives:
#   [0] .../src/phosys_parser/utils
#   [1] .../src/phosys_parser
#   [2] .../src
#   [3] .../ (project root)
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory.

    The project root is defined as the directory that contains:
      - src/
      - tests/
      - config/
      - mock_files/
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("mock_files/testlang.language")
        resolve_project_path(Path("config") / "phosys_parser.yml")
    """
    return project_root() / Path(relative)


def mock_file_path(filename: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file under the top-level mock_files/ directory.
    """
    return resolve_project_path(Path("mock_files") / filename)
