"""Binary searches over sorted sequences."""

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import Any

__all__ = ["lower_bound", "upper_bound"]


def lower_bound(iterable: Sequence[Any], key: Any) -> int:
    """Return the first index whose element is not less than ``key``."""
    return bisect_left(iterable, key)


def upper_bound(iterable: Sequence[Any], key: Any) -> int:
    """Return the first index whose element is greater than ``key``."""
    return bisect_right(iterable, key)