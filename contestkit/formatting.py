"""Formatting helpers for printing answers."""

from collections.abc import Iterable

__all__ = ["display"]


def display(items: Iterable[object]) -> str:
    """Return the items as strings joined by single spaces."""
    return " ".join(map(str, items))