"""Graph module providing dependency graph abstractions.

This module contains:
- DependencyGraph[T]: A generic, mutable directed acyclic graph
- TopologicalComparator[T]: Ordering of node subsets by topological position
- breadth_first_closure, find_path, topological_sort: The underlying algorithms
"""

from ._algorithms import breadth_first_closure, find_path, topological_sort
from ._comparator import TopologicalComparator
from ._dependency_graph import DependencyGraph
from ._errors import (
    CycleDetectedError,
    DependencyGraphError,
    EdgeNotFoundError,
    NodeNotFoundError,
    UnknownNodeError,
)

__all__ = [
    "CycleDetectedError",
    "DependencyGraph",
    "DependencyGraphError",
    "EdgeNotFoundError",
    "NodeNotFoundError",
    "TopologicalComparator",
    "UnknownNodeError",
    "breadth_first_closure",
    "find_path",
    "topological_sort",
]
