"""Generic dependency graph abstraction."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from ._algorithms import breadth_first_closure, find_path, topological_sort
from ._comparator import TopologicalComparator
from ._errors import CycleDetectedError, EdgeNotFoundError, NodeNotFoundError, UnknownNodeError

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Iterator

T = TypeVar("T", bound="Hashable")

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DependencyGraph(Generic[T]):
    """A mutable directed acyclic graph of "depends on" relationships.

    The graph is generic over the node type T (e.g., str, int, tuples).
    Nodes are created implicitly by :meth:`depend` and destroyed by the
    removal methods.

    Two mappings are kept symmetric on every mutation:
    - dependencies[b] = {a} means "b depends on a"
    - dependents[a] = {b} means "a is depended on by b"

    The graph does no locking. Callers mutating it from several threads
    must synchronize access themselves.

    Attributes:
        _dependencies: Mapping from node to the nodes it directly depends on.
        _dependents: Mapping from node to the nodes that directly depend on it.

    """

    _dependencies: dict[T, set[T]] = field(default_factory=dict)
    _dependents: dict[T, set[T]] = field(default_factory=dict)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[T, T]]) -> DependencyGraph[T]:
        """Build a graph from (node, dep) pairs.

        An edge (a, b) means "a depends on b".

        Args:
            edges: Iterable of (node, dep) tuples.

        Returns:
            A new DependencyGraph instance.

        Raises:
            CycleDetectedError: If the edges contain a cycle.

        Example:
            >>> graph = DependencyGraph.from_edges([("b", "a"), ("c", "b")])
            >>> graph.immediate_dependencies("b")
            frozenset({'a'})

        """
        graph: DependencyGraph[T] = cls()
        for node, dep in edges:
            graph.depend(node, dep)
        return graph

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def depend(self, node: T, dep: T) -> None:
        """Record that ``node`` depends on ``dep``.

        Args:
            node: The dependent node.
            dep: The node it depends on.

        Raises:
            CycleDetectedError: If ``node == dep`` or ``dep`` already
                depends on ``node``. The graph is left unchanged.

        """
        path = find_path(self._dependencies, dep, node)
        if path is not None:
            raise CycleDetectedError(node, dep, path)

        self._dependencies.setdefault(node, set()).add(dep)
        self._dependents.setdefault(dep, set()).add(node)
        logger.debug(f"Added edge {node!r} -> {dep!r}")

    def remove_edge(self, node: T, dep: T) -> None:
        """Remove the single edge from ``node`` to ``dep``.

        Both endpoints stay in the graph, along with their other edges.

        Raises:
            EdgeNotFoundError: If the edge is not recorded.

        """
        if dep not in self._dependencies.get(node, ()):
            raise EdgeNotFoundError(node, dep)

        self._dependencies[node].discard(dep)
        self._dependents[dep].discard(node)
        logger.debug(f"Removed edge {node!r} -> {dep!r}")

    def remove_node(self, node: T) -> None:
        """Remove all outgoing edges of ``node``.

        Nodes that depend on ``node`` keep depending on it.

        Raises:
            NodeNotFoundError: If ``node`` has no recorded dependencies entry.

        """
        if node not in self._dependencies:
            raise NodeNotFoundError(node)

        for dep in self._dependencies.pop(node):
            self._dependents[dep].discard(node)
        logger.debug(f"Removed outgoing edges of {node!r}")

    def remove_all(self, node: T) -> None:
        """Remove ``node`` and every reference to it from the graph.

        Raises:
            UnknownNodeError: If ``node`` is not in the graph.

        """
        if node not in self:
            raise UnknownNodeError(node)

        for dep in self._dependencies.pop(node, ()):
            self._dependents[dep].discard(node)
        for dependent in self._dependents.pop(node, ()):
            self._dependencies[dependent].discard(node)
        logger.debug(f"Removed node {node!r}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def nodes(self) -> frozenset[T]:
        """All nodes in the graph."""
        return frozenset(self._dependencies.keys()) | frozenset(self._dependents.keys())

    def edges(self) -> Iterator[tuple[T, T]]:
        """Iterate over every recorded (node, dep) pair."""
        for node, deps in self._dependencies.items():
            for dep in deps:
                yield node, dep

    def immediate_dependencies(self, node: T) -> frozenset[T]:
        """Get direct dependencies of a node (nodes it depends on).

        Args:
            node: The node to query.

        Returns:
            Set of nodes that this node directly depends on.

        """
        return frozenset(self._dependencies.get(node, ()))

    def immediate_dependents(self, node: T) -> frozenset[T]:
        """Get direct dependents of a node (nodes that depend on it).

        Args:
            node: The node to query.

        Returns:
            Set of nodes that directly depend on this node.

        """
        return frozenset(self._dependents.get(node, ()))

    def transitive_dependencies(self, node: T) -> frozenset[T]:
        """Get all nodes that ``node`` depends on, directly or transitively."""
        return breadth_first_closure(self._dependencies, (node,))

    def transitive_dependencies_set(self, nodes: Iterable[T]) -> frozenset[T]:
        """Get all nodes that any of ``nodes`` depends on, excluding ``nodes`` themselves."""
        return breadth_first_closure(self._dependencies, nodes)

    def transitive_dependents(self, node: T) -> frozenset[T]:
        """Get all nodes that depend on ``node``, directly or transitively."""
        return breadth_first_closure(self._dependents, (node,))

    def transitive_dependents_set(self, nodes: Iterable[T]) -> frozenset[T]:
        """Get all nodes that depend on any of ``nodes``, excluding ``nodes`` themselves."""
        return breadth_first_closure(self._dependents, nodes)

    def depends(self, node: T, dep: T) -> bool:
        """Check if ``node`` depends on ``dep``, directly or transitively."""
        return node != dep and find_path(self._dependencies, node, dep) is not None

    def topological_sort(self) -> list[T]:
        """Return all nodes in topological order.

        Returns:
            List of nodes where each node appears before everything it depends on.

        """
        # Nodes known only as dependencies have no entry in _dependencies
        dependencies: dict[T, set[T]] = {node: set() for node in self._dependents}
        dependencies.update(self._dependencies)
        return topological_sort(dependencies)

    def topological_comparator(self, nodes: Iterable[T]) -> TopologicalComparator[T]:
        """Build a comparator ordering ``nodes`` as :meth:`topological_sort` does.

        Args:
            nodes: The subset of nodes to be compared.

        Returns:
            A TopologicalComparator over exactly ``nodes``.

        Raises:
            UnknownNodeError: If one of ``nodes`` is not in the graph.

        """
        return TopologicalComparator.from_order(self.topological_sort(), nodes)

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._dependencies.keys() | self._dependents.keys())

    def __contains__(self, node: object) -> bool:
        """Check if a node is in the graph."""
        return node in self._dependencies or node in self._dependents
