"""Binary indexed tree (Fenwick tree) for prefix sums.

Positions are 1-based. Both point addition and prefix sums take O(log n).
"""

__all__ = ["FenwickTree"]


class FenwickTree:
    """Fenwick tree over ``n`` positions numbered 1 to ``n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._size = n + 1
        self._tree = [0] * (n + 1)

    def __len__(self) -> int:
        return self._size - 1

    def add(self, i: int, x: int) -> None:
        """Add ``x`` to the element at position ``i``."""
        if i <= 0:
            raise IndexError("positions start at 1")
        while i < self._size:
            self._tree[i] += x
            i += i & -i

    def sum(self, i: int) -> int:
        """Return the sum of positions 1 to ``i`` inclusive."""
        if i < 0 or i >= self._size:
            raise IndexError("position out of range")
        total = 0
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total

    def sum_range(self, start: int, end: int) -> int:
        """Return the sum of positions ``start`` to ``end - 1``."""
        if start < 1:
            raise IndexError("positions start at 1")
        return self.sum(end - 1) - self.sum(start - 1)