"""Operations on rectangular grids."""

from collections.abc import Sequence
from typing import TypeVar

__all__ = ["rotate90"]

T = TypeVar("T")


def rotate90(grid: Sequence[Sequence[T]]) -> list[list[T]]:
    """Return ``grid`` rotated a quarter turn clockwise.

    Raises ValueError if the rows differ in length.
    """
    return [list(column) for column in zip(*reversed(grid), strict=True)]