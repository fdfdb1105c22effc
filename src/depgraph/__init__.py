"""Directed acyclic dependency graphs."""

__all__ = [
    "CycleDetectedError",
    "DependencyGraph",
    "DependencyGraphError",
    "EdgeNotFoundError",
    "GraphFile",
    "GraphFileError",
    "NodeNotFoundError",
    "TopologicalComparator",
    "UnknownNodeError",
    "load_graph_from_toml",
    "topological_sort",
]

from ._graph import (
    CycleDetectedError,
    DependencyGraph,
    DependencyGraphError,
    EdgeNotFoundError,
    NodeNotFoundError,
    TopologicalComparator,
    UnknownNodeError,
    topological_sort,
)
from ._io import GraphFile, GraphFileError, load_graph_from_toml
