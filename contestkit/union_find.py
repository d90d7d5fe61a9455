"""Disjoint-set forest with union by size and path compression."""

__all__ = ["UnionFind"]


class UnionFind:
    """Disjoint sets over the elements ``0`` to ``size - 1``."""

    def __init__(self, size: int) -> None:
        self._n = size
        # Negative entries hold the size of a root's set; others hold a parent.
        self._parent_or_size = [-1] * size

    def __len__(self) -> int:
        return self._n

    def merge(self, a: int, b: int) -> int:
        """Join the sets holding ``a`` and ``b`` and return the new root."""
        x, y = self.parent(a), self.parent(b)
        if x == y:
            return x
        if -self._parent_or_size[x] < -self._parent_or_size[y]:
            x, y = y, x
        self._parent_or_size[x] += self._parent_or_size[y]
        self._parent_or_size[y] = x
        return x

    def same(self, a: int, b: int) -> bool:
        """Return whether ``a`` and ``b`` are in the same set."""
        return self.parent(a) == self.parent(b)

    def parent(self, a: int) -> int:
        """Return the root of the set holding ``a``."""
        self._check(a)
        root = a
        while self._parent_or_size[root] >= 0:
            root = self._parent_or_size[root]
        while self._parent_or_size[a] >= 0 and self._parent_or_size[a] != root:
            self._parent_or_size[a], a = root, self._parent_or_size[a]
        return root

    def size(self, a: int) -> int:
        """Return the size of the set holding ``a``."""
        return -self._parent_or_size[self.parent(a)]

    def make_groups(self) -> list[list[int]]:
        """Return every set as a sorted list, ordered by root index."""
        groups: list[list[int]] = [[] for _ in range(self._n)]
        for element in range(self._n):
            groups[self.parent(element)].append(element)
        return [group for group in groups if group]

    def _check(self, a: int) -> None:
        if not 0 <= a < self._n:
            raise IndexError(f"element {a} out of range")