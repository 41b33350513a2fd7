
"""
CLI command modules for phosys_parser.

Each command module defines a single Typer-compatible command function.
"""

from phosys_parser.cli.commands.check import check_command
from phosys_parser.cli.commands.export import export_command
from phosys_parser.cli.commands.show import show_command

__all__ = [
    "check_command",
    "export_command",
    "show_command",
]
