from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from webdoc.config import get_settings
from webdoc.loader import resolve_router
from webdoc.router import Router
from webdoc.tree.export import endpoint_rows, tree_to_json
from webdoc.tree.model import Node


app = typer.Typer(no_args_is_help=True, add_completion=False)

console = Console()


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    level = logging.DEBUG if verbose else get_settings().log_level
    logger = logging.getLogger("webdoc")
    logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(RichHandler(console=console, show_path=False))


def _load(target: str) -> Router:
    try:
        return resolve_router(target)
    except (ImportError, AttributeError, TypeError, ValueError) as exc:
        raise typer.BadParameter(f"Cannot load router {target!r}: {exc}") from exc


def _add_branch(branch: Tree, node: Node) -> None:
    for method in sorted(node.methods):
        doc = node.methods[method]
        label = f"[bold cyan]{method}[/bold cyan]"
        if doc.title:
            label += f"  {escape(doc.title)}"
        if doc.url_params:
            params = ", ".join(f"{k}:{v}" for k, v in sorted(doc.url_params.items()))
            label += f"  [dim]({escape(params)})[/dim]"
        branch.add(label)
    for seg in sorted(node.children):
        _add_branch(branch.add(f"[bold]{escape(seg)}[/bold]"), node.children[seg])


@app.command()
def tree(
    target: str = typer.Argument(..., help="Router to inspect, as module:attribute"),
) -> None:
    router = _load(target)
    root = Tree("[bold green]/[/bold green]")
    _add_branch(root, router.doc_tree.root)
    console.print(root)


@app.command()
def endpoints(
    target: str = typer.Argument(..., help="Router to inspect, as module:attribute"),
    method: Optional[str] = typer.Option(None, help="Filter by HTTP method (GET/POST/...)"),
    format: str = typer.Option("table", help="Output format: table|json"),
) -> None:
    fmt = format.lower().strip()
    if fmt not in ("table", "json"):
        raise typer.BadParameter("format must be one of: table, json")

    router = _load(target)
    rows = endpoint_rows(router.doc_tree)
    if method:
        rows = [r for r in rows if r["method"] == method.upper()]

    if fmt == "json":
        typer.echo(json.dumps(rows, indent=2))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("METHOD", no_wrap=True)
    table.add_column("PATH")
    table.add_column("TITLE")
    table.add_column("URL PARAMS")

    for r in rows:
        params = ", ".join(f"{k}:{v}" for k, v in sorted(r["url_params"].items()))
        table.add_row(r["method"], escape(r["path"]), escape(r["title"]), escape(params))

    console.print(table)
    console.print(f"Endpoints: {len(rows)}")


@app.command()
def export(
    target: str = typer.Argument(..., help="Router to export, as module:attribute"),
    out: Optional[str] = typer.Option(None, help="Output path (default: print to stdout)"),
) -> None:
    router = _load(target)
    text = tree_to_json(router.doc_tree)

    if out:
        out_path = Path(out).expanduser()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        console.print(f"[bold green]Wrote[/bold green] doc tree to: {out_path}")
    else:
        typer.echo(text)


@app.command()
def ping() -> None:
    console.print("pong")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
