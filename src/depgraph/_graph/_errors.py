"""Errors raised by dependency graph operations."""

from collections.abc import Hashable, Sequence


class DependencyGraphError(Exception):
    """Base class for failed graph mutations and lookups."""


class CycleDetectedError(DependencyGraphError):
    """Raised when adding an edge would make the graph cyclic.

    Attributes:
        node: The node that was asked to depend on ``dep``.
        dep: The requested dependency.
        path: The existing dependency chain from ``dep`` to ``node``.
            For a self-dependency this is ``(node,)``.

    """

    def __init__(self, node: Hashable, dep: Hashable, path: Sequence[Hashable]) -> None:
        self.node = node
        self.dep = dep
        self.path = tuple(path)
        chain = " -> ".join(repr(n) for n in self.cycle)
        if node == dep:
            msg = f"Circular dependency: {node!r} cannot depend on itself"
        else:
            msg = f"Circular dependency: {dep!r} already depends on {node!r} via: {chain}"
        super().__init__(msg)

    @property
    def cycle(self) -> tuple[Hashable, ...]:
        """The cycle the rejected edge would have closed, starting and ending at ``node``."""
        return (self.node, *self.path)


class EdgeNotFoundError(DependencyGraphError):
    """Raised when removing an edge that is not recorded."""

    def __init__(self, node: Hashable, dep: Hashable) -> None:
        self.node = node
        self.dep = dep
        super().__init__(f"Edge node: {node!r}, dep: {dep!r} does not exist")


class NodeNotFoundError(DependencyGraphError):
    """Raised when a node has no outgoing-edge entry to remove."""

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(f"Node {node!r} has no recorded dependencies")


class UnknownNodeError(DependencyGraphError):
    """Raised when a node is not present in the graph at all."""

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(f"Unknown node: {node!r}")
