
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from phosys_parser.cli.utils import count_nodes, load_document, render_tree

console = Console()


def show_command(
    document: Path = typer.Argument(..., exists=True, readable=True),
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
    Print the parsed tree of a PHOSYS document.
    """
    result = load_document(
        document,
        root_name=root_name,
        any_root=any_root,
        depth_aware=depth_aware,
        verbose=verbose,
    )

    console.print(render_tree(result.tree))

    counts = count_nodes(result.tree)
    console.print(
        f"{counts['containers']} container(s), {counts['leaves']} leaf/leaves "
        f"({counts['nameless_leaves']} nameless), "
        f"{len(result.diagnostics)} diagnostic(s)",
        highlight=False,
    )
