import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from depgraph._graph import DependencyGraph, DependencyGraphError
from depgraph._io import GraphFileError, load_graph_from_toml

from .config import ConfigError, get_config
from .graph_query import get_dependency_tree, get_related_nodes, list_nodes, order_nodes, summarize
from .graph_render import render_node_list, render_node_table, render_summary, render_tree

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

GraphOption = Annotated[
    Path | None,
    typer.Option("-g", "--graph", help="Path to graph TOML file (defaults to [tool.depgraph].graph)"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Depgraph CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]✗ {escape(message)}[/red]")
    return typer.Exit(code=1)


def _load_graph(graph_path: Path | None) -> DependencyGraph[str]:
    """Load the graph from the CLI option or the pyproject.toml config."""
    if graph_path is None:
        try:
            config = get_config()
        except ConfigError as e:
            raise _fail(str(e)) from e
        if config.graph is None:
            msg = "No graph specified. Pass --graph or configure [tool.depgraph].graph in pyproject.toml."
            raise typer.BadParameter(msg)
        graph_path = config.graph

    logger.debug(f"Loading graph from {graph_path}")
    try:
        return load_graph_from_toml(graph_path)
    except (GraphFileError, DependencyGraphError) as e:
        raise _fail(str(e)) from e


@app.command()
def check(graph: GraphOption = None) -> None:
    """Check that a graph file is valid and acyclic."""
    dependency_graph = _load_graph(graph)
    render_summary(summarize(dependency_graph), err_console)
    err_console.print()
    err_console.print("[green]✓ Graph is valid[/green]")


@app.command()
def nodes(graph: GraphOption = None) -> None:
    """List every node with its direct dependency counts."""
    dependency_graph = _load_graph(graph)
    render_node_table(list_nodes(dependency_graph), out_console)


@app.command()
def deps(
    node: Annotated[str, typer.Argument(help="Node to query")],
    graph: GraphOption = None,
    *,
    transitive: Annotated[
        bool,
        typer.Option("-t", "--transitive", help="Include transitive dependencies"),
    ] = False,
    invert: Annotated[
        bool,
        typer.Option("--invert", help="Show dependents instead of dependencies"),
    ] = False,
) -> None:
    """Show the dependencies (or dependents) of a node."""
    dependency_graph = _load_graph(graph)
    try:
        related = get_related_nodes(dependency_graph, node, transitive=transitive, invert=invert)
    except DependencyGraphError as e:
        raise _fail(str(e)) from e
    render_node_list(related, out_console)


@app.command()
def tree(
    node: Annotated[str, typer.Argument(help="Root node of the tree")],
    graph: GraphOption = None,
    *,
    invert: Annotated[
        bool,
        typer.Option("--invert", help="Show what depends on the node"),
    ] = False,
    depth: Annotated[
        int | None,
        typer.Option("--depth", min=0, help="Maximum depth to display"),
    ] = None,
) -> None:
    """Show the dependency tree of a node."""
    dependency_graph = _load_graph(graph)
    try:
        tree_node = get_dependency_tree(dependency_graph, node, invert=invert, max_depth=depth)
    except DependencyGraphError as e:
        raise _fail(str(e)) from e
    render_tree(tree_node, out_console)


@app.command(name="sort")
def sort_command(graph: GraphOption = None) -> None:
    """Print every node in topological order (dependents first)."""
    dependency_graph = _load_graph(graph)
    render_node_list(dependency_graph.topological_sort(), out_console, numbered=True)


@app.command()
def order(
    names: Annotated[list[str], typer.Argument(help="Nodes to order")],
    graph: GraphOption = None,
) -> None:
    """Print the given nodes in their topological order."""
    dependency_graph = _load_graph(graph)
    try:
        ordered = order_nodes(dependency_graph, names)
    except DependencyGraphError as e:
        raise _fail(str(e)) from e
    render_node_list(ordered, out_console, numbered=True)


def main() -> None:
    app()
