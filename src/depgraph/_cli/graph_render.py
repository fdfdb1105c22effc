"""Rich rendering utilities for graph query commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

if TYPE_CHECKING:
    from rich.console import Console

    from .graph_query import GraphSummary, NodeInfo, TreeNode


def render_summary(summary: GraphSummary, console: Console) -> None:
    """Render graph counts as a Rich table.

    Args:
        summary: GraphSummary to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right")

    table.add_row("Nodes", str(summary.node_count))
    table.add_row("Edges", str(summary.edge_count))
    table.add_row("Without dependencies", str(summary.independent_count))

    console.print(table)


def render_node_table(nodes: list[NodeInfo], console: Console) -> None:
    """Render node list as a Rich table.

    Args:
        nodes: List of NodeInfo to render.
        console: Rich Console to output to.

    """
    if not nodes:
        console.print("[dim]Graph has no nodes[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Node", style="bold")
    table.add_column("Deps", justify="right")
    table.add_column("Dependents", justify="right")

    for node in nodes:
        table.add_row(
            escape(node.name),
            str(node.dependency_count),
            str(node.dependent_count),
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(nodes)} nodes[/dim]")


def render_node_list(names: list[str], console: Console, *, numbered: bool = False) -> None:
    """Print one node per line, optionally prefixed by its position."""
    if not names:
        console.print("[dim]None[/dim]")
        return

    width = len(str(len(names)))
    for index, name in enumerate(names, start=1):
        if numbered:
            console.print(f"[dim]{index:>{width}}.[/dim] {escape(name)}")
        else:
            console.print(escape(name))


def render_tree(tree_node: TreeNode, console: Console) -> None:
    """Render a dependency tree using Rich Tree.

    Args:
        tree_node: TreeNode root to render.
        console: Rich Console to output to.

    """
    rich_tree = Tree(f"[bold]{escape(tree_node.name)}[/bold]")
    _add_tree_children(rich_tree, tree_node.children)
    console.print(rich_tree)


def _add_tree_children(parent: Tree, children: list[TreeNode]) -> None:
    """Recursively add children to a Rich Tree.

    Args:
        parent: Parent Tree node to add children to.
        children: List of TreeNode children.

    """
    for child in children:
        child_tree = parent.add(escape(child.name))
        _add_tree_children(child_tree, child.children)
