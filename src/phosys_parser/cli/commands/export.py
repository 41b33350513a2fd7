from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from phosys_parser.cli.utils import load_document, write_json
from phosys_parser.exporter import diagnostics_to_list, tree_to_dict

console = Console()


def export_command(
    document: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    root_name: Optional[str] = typer.Option(
        None,
        "--root-name",
        help="Required top-level block name (default from config)",
    ),
    any_root: bool = typer.Option(
        False,
        "--any-root",
        help="Accept any top-level block name",
    ),
    depth_aware: Optional[bool] = typer.Option(
        None,
        "--depth-aware/--no-depth-aware",
        help="Match closing markers by nesting depth (default from config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export the parsed tree to JSON (stdout by default).
    """
    result = load_document(
        document,
        root_name=root_name,
        any_root=any_root,
        depth_aware=depth_aware,
        verbose=verbose,
    )

    data = {
        "tree": tree_to_dict(result.tree),
        "diagnostics": diagnostics_to_list(result.diagnostics),
    }

    if verbose:
        console.log("Exporting JSON")

    write_json(data, out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")
