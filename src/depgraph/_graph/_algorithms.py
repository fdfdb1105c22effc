"""Graph algorithms for dependency graph operations."""

from collections import defaultdict
from collections.abc import Collection, Hashable, Iterable, Mapping
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def breadth_first_closure(
    neighbors: Mapping[T, Collection[T]],
    seeds: Iterable[T],
) -> frozenset[T]:
    """Collect every node reachable from the seeds, excluding the seeds.

    The traversal runs in rounds: every node of the current frontier is
    visited, and its unvisited neighbors form the next frontier.

    Args:
        neighbors: Mapping from node to its adjacent nodes in one direction.
        seeds: Starting nodes.

    Returns:
        All reachable nodes minus the seeds themselves.

    Example:
        >>> sorted(breadth_first_closure({"c": ["b"], "b": ["a"]}, ["c"]))
        ['a', 'b']

    """
    start = frozenset(seeds)
    visited: set[T] = set(start)
    frontier = list(start)

    while frontier:
        next_frontier: list[T] = []
        for node in frontier:
            for neighbor in neighbors.get(node, ()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    next_frontier.append(neighbor)
        frontier = next_frontier

    return frozenset(visited) - start


def find_path(
    neighbors: Mapping[T, Collection[T]],
    start: T,
    goal: T,
) -> tuple[T, ...] | None:
    """Find a shortest path from start to goal.

    Args:
        neighbors: Mapping from node to its adjacent nodes.
        start: First node of the path.
        goal: Last node of the path.

    Returns:
        The path including both endpoints, or None if goal is unreachable.

    """
    if start == goal:
        return (start,)

    parents: dict[T, T] = {}
    visited: set[T] = {start}
    frontier = [start]

    while frontier:
        next_frontier: list[T] = []
        for node in frontier:
            for neighbor in neighbors.get(node, ()):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                parents[neighbor] = node
                if neighbor == goal:
                    path = [goal]
                    while path[-1] != start:
                        path.append(parents[path[-1]])
                    return tuple(reversed(path))
                next_frontier.append(neighbor)
        frontier = next_frontier

    return None


def topological_sort(dependencies: Mapping[T, Collection[T]]) -> list[T]:
    """Sort a graph topologically (dependents before their dependencies).

    Given a graph represented as a mapping from nodes to the nodes they
    depend on, return nodes in an order where each node appears before
    everything it depends on. Nodes that only appear as dependencies are
    included.

    Args:
        dependencies: Mapping from node to collection of nodes it depends on.

    Returns:
        List of nodes in topological order.

    Raises:
        ValueError: If the graph contains a cycle.

    Example:
        >>> # c depends on b, b depends on a
        >>> topological_sort({"c": ["b"], "b": ["a"]})
        ['c', 'b', 'a']

    """
    # In-degree counts how many nodes depend on each node
    indegree: defaultdict[T, int] = defaultdict(int)
    for node, deps in dependencies.items():
        indegree[node] = indegree.get(node, 0)
        for dep in deps:
            indegree[dep] += 1

    stack = [node for node, deg in indegree.items() if deg == 0]
    order: list[T] = []

    while stack:
        node = stack.pop()
        order.append(node)
        for dep in dependencies.get(node, ()):
            indegree[dep] -= 1
            if indegree[dep] == 0:
                stack.append(dep)

    if len(order) != len(indegree):
        msg = "Cycle detected in graph"
        raise ValueError(msg)

    return order
