
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from phosys_parser.core.exceptions import PhosysFormatError
from phosys_parser.loader.nodes import Container, Leaf, Node
from phosys_parser.loader.tree_builder import ParseResult
from phosys_parser.logging import set_debug
from phosys_parser.parser_core import PhosysParser

console = Console()
err_console = Console(stderr=True)


def load_document(
    path: Path,
    *,
    root_name: Optional[str] = None,
    any_root: bool = False,
    depth_aware: Optional[bool] = None,
    verbose: bool = False,
) -> ParseResult:
    """
    Read and parse a document, exiting with code 2 on a hard format error.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    if verbose:
        set_debug(True)

    t0 = time.perf_counter()

    parser = PhosysParser(root_name=root_name, depth_aware=depth_aware)
    if any_root:
        parser.root_name = None

    try:
        result = parser.run(path)
    except PhosysFormatError as exc:
        err_console.print(f"[red]error:[/red] {path}: {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Parsed {path} in {elapsed:.3f}s")

    return result


def render_tree(node: Node, branch: Optional[Tree] = None) -> Tree:
    """
    Build a Rich tree for display. Nameless leaves are shown dimmed.
    """
    if isinstance(node, Leaf):
        if node.name:
            label = f"[cyan]{escape(node.name)}[/cyan]: {escape(node.value)}"
        else:
            label = f"[dim]{escape(node.value)}[/dim]"
        if branch is None:
            return Tree(label)
        branch.add(label)
        return branch

    label = f"[bold]{escape(node.name)}[/bold]"
    sub = Tree(label) if branch is None else branch.add(label)
    for child in node.children:
        render_tree(child, sub)
    return sub


def count_nodes(tree: Container) -> Dict[str, int]:
    leaves = containers = nameless = 0
    for node in tree.iter_subtree():
        if isinstance(node, Container):
            containers += 1
        else:
            leaves += 1
            if node.is_nameless:
                nameless += 1
    return {"containers": containers, "leaves": leaves, "nameless_leaves": nameless}


def write_json(
    data: Any,
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
