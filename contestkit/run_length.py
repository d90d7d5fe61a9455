"""Run-length encoding of strings."""

from collections.abc import Iterable
from itertools import groupby

__all__ = ["run_length_encoding", "run_length_decoding"]


def run_length_encoding(text: str) -> list[tuple[str, int]]:
    """Return ``(character, run length)`` pairs for each run in ``text``."""
    return [(char, sum(1 for _ in run)) for char, run in groupby(text)]


def run_length_decoding(rle_data: Iterable[tuple[str, int]]) -> str:
    """Rebuild the string described by ``(character, run length)`` pairs."""
    return "".join(char * count for char, count in rle_data)