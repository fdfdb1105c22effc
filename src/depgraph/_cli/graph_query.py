"""Graph query functions for CLI commands.

This module provides pure functions for querying a dependency graph.
These are the functional core - no I/O, no Rich rendering.
"""

from __future__ import annotations

from dataclasses import dataclass

from depgraph._graph import DependencyGraph, UnknownNodeError


@dataclass(frozen=True, slots=True)
class GraphSummary:
    """Counts describing a whole graph."""

    node_count: int
    edge_count: int
    independent_count: int


@dataclass(frozen=True, slots=True)
class NodeInfo:
    """Basic information about a node for listing."""

    name: str
    dependency_count: int
    dependent_count: int


@dataclass(slots=True)
class TreeNode:
    """A node in a dependency tree for rendering."""

    name: str
    children: list[TreeNode]


def _require_node(graph: DependencyGraph[str], node: str) -> None:
    if node not in graph:
        raise UnknownNodeError(node)


def summarize(graph: DependencyGraph[str]) -> GraphSummary:
    """Count nodes, edges and nodes without dependencies."""
    nodes = graph.nodes()
    return GraphSummary(
        node_count=len(nodes),
        edge_count=sum(1 for _ in graph.edges()),
        independent_count=sum(1 for n in nodes if not graph.immediate_dependencies(n)),
    )


def list_nodes(graph: DependencyGraph[str]) -> list[NodeInfo]:
    """List every node of the graph, sorted by name.

    Args:
        graph: The graph to analyze.

    Returns:
        List of NodeInfo, one per node.

    """
    return [
        NodeInfo(
            name=node,
            dependency_count=len(graph.immediate_dependencies(node)),
            dependent_count=len(graph.immediate_dependents(node)),
        )
        for node in sorted(graph.nodes())
    ]


def get_related_nodes(
    graph: DependencyGraph[str],
    node: str,
    *,
    transitive: bool = False,
    invert: bool = False,
) -> list[str]:
    """Get the dependencies (or dependents) of a node, sorted by name.

    Args:
        graph: The graph to query.
        node: The node to start from.
        transitive: If True, follow edges transitively.
        invert: If False, return what the node depends on.
                If True, return what depends on the node.

    Returns:
        Sorted list of node names.

    Raises:
        UnknownNodeError: If the node is not in the graph.

    """
    _require_node(graph, node)

    match (transitive, invert):
        case (False, False):
            related = graph.immediate_dependencies(node)
        case (False, True):
            related = graph.immediate_dependents(node)
        case (True, False):
            related = graph.transitive_dependencies(node)
        case (True, True):
            related = graph.transitive_dependents(node)

    return sorted(related)


def get_dependency_tree(
    graph: DependencyGraph[str],
    node: str,
    *,
    invert: bool = False,
    max_depth: int | None = None,
) -> TreeNode:
    """Build a dependency tree for visualization.

    Each node is expanded once; later occurrences are omitted.

    Args:
        graph: The graph to query.
        node: The root node of the tree.
        invert: If False, show what the node depends on.
                If True, show what depends on the node (reverse dependencies).
        max_depth: Maximum depth to traverse (None for unlimited).

    Returns:
        TreeNode representing the dependency tree.

    Raises:
        UnknownNodeError: If the node is not in the graph.

    """
    _require_node(graph, node)

    def build_tree(name: str, depth: int, visited: set[str]) -> TreeNode:
        children: list[TreeNode] = []

        if max_depth is not None and depth >= max_depth:
            return TreeNode(name=name, children=children)

        neighbors = graph.immediate_dependents(name) if invert else graph.immediate_dependencies(name)

        for neighbor in sorted(neighbors):
            if neighbor not in visited:
                visited.add(neighbor)
                children.append(build_tree(neighbor, depth + 1, visited))

        return TreeNode(name=name, children=children)

    return build_tree(node, 0, {node})


def order_nodes(graph: DependencyGraph[str], nodes: list[str]) -> list[str]:
    """Order a subset of nodes as they appear in a full topological sort.

    Raises:
        UnknownNodeError: If one of the nodes is not in the graph.

    """
    comparator = graph.topological_comparator(nodes)
    return comparator.sort(nodes)
