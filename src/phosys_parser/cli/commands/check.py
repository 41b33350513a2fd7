
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from phosys_parser.cli.utils import load_document

console = Console()


def check_command(
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
    Report structural problems. Exits with 1 if any were found.
    """
    result = load_document(
        document,
        root_name=root_name,
        any_root=any_root,
        depth_aware=depth_aware,
        verbose=verbose,
    )

    if result.ok:
        console.print(f"[green]OK[/green] {document}: no structural problems")
        return

    table = Table(title=f"Diagnostics for {document.name}")
    table.add_column("Line", justify="right")
    table.add_column("Kind", style="bold")
    table.add_column("Block")
    table.add_column("Message")

    for d in result.diagnostics:
        table.add_row(str(d.lineno), d.kind.value, escape(d.block_name), escape(d.message))

    console.print(table)
    raise typer.Exit(code=1)
