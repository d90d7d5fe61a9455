"""Lexicographically smallest topological order of a directed graph."""

import heapq
from collections.abc import Sequence

__all__ = ["topological_sort"]


def topological_sort(graph: Sequence[Sequence[int]], in_degree: Sequence[int]) -> list[int]:
    """Return vertices in topological order, always taking the smallest ready vertex.

    Vertices on a cycle never become ready and are left out of the result.
    """
    remaining = list(in_degree)
    heap = [v for v, degree in enumerate(remaining) if degree == 0]
    heapq.heapify(heap)
    order = []
    while heap:
        v = heapq.heappop(heap)
        order.append(v)
        for w in graph[v]:
            remaining[w] -= 1
            if remaining[w] == 0:
                heapq.heappush(heap, w)
    return order