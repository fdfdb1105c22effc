"""Ordering of node subsets by their position in a topological sort."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from ._errors import UnknownNodeError

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Sequence

T = TypeVar("T", bound="Hashable")


@dataclass(frozen=True, slots=True)
class TopologicalComparator(Generic[T]):
    """Compares nodes of a fixed subset by their topological position.

    Positions are indices into one full topological sort of the graph,
    taken when the comparator was built. Later graph mutations do not
    affect an existing comparator.

    Attributes:
        _positions: Mapping from each node of the subset to its index.

    """

    _positions: dict[T, int] = field(default_factory=dict)

    @classmethod
    def from_order(cls, order: Sequence[T], nodes: Iterable[T]) -> TopologicalComparator[T]:
        """Build a comparator for ``nodes`` from a full topological order.

        Args:
            order: Every node of the graph in topological order.
            nodes: The subset to be compared.

        Returns:
            A comparator covering exactly ``nodes``.

        Raises:
            UnknownNodeError: If a node of the subset is missing from ``order``.

        """
        wanted = set(nodes)
        positions = {node: index for index, node in enumerate(order) if node in wanted}
        for node in wanted:
            if node not in positions:
                raise UnknownNodeError(node)
        return cls(_positions=positions)

    def position(self, node: T) -> int:
        """Return the index of ``node`` in the full topological sort.

        Raises:
            UnknownNodeError: If ``node`` is not part of the compared subset.

        """
        try:
            return self._positions[node]
        except KeyError:
            raise UnknownNodeError(node) from None

    key = position

    def less(self, a: T, b: T) -> bool:
        """Return True if ``a`` comes before ``b``."""
        return self.position(a) < self.position(b)

    def compare(self, a: T, b: T) -> int:
        """Three-way comparison, for use with :func:`functools.cmp_to_key`."""
        pa, pb = self.position(a), self.position(b)
        return (pa > pb) - (pa < pb)

    __call__ = compare

    def sort(self, nodes: Iterable[T]) -> list[T]:
        """Return ``nodes`` in their relative topological order."""
        return sorted(nodes, key=self.position)

    def values(self) -> list[T]:
        """Return the whole subset in topological order."""
        return sorted(self._positions, key=self._positions.__getitem__)

    def __len__(self) -> int:
        """Return the number of nodes in the subset."""
        return len(self._positions)

    def __contains__(self, node: object) -> bool:
        """Check if a node is part of the subset."""
        return node in self._positions
