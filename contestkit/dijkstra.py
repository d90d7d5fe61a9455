"""Single-source shortest paths on graphs with non-negative edge costs."""

import heapq
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["INF", "Edge", "dijkstra"]

INF = 1 << 60


@dataclass(frozen=True)
class Edge:
    """A directed edge to vertex ``to`` with weight ``cost``."""

    to: int
    cost: int


def dijkstra(graph: Sequence[Sequence[Edge]], start: int) -> list[int]:
    """Return the distance from ``start`` to every vertex; unreachable ones get ``INF``."""
    dist = [INF] * len(graph)
    dist[start] = 0
    heap = [(0, start)]
    while heap:
        d, v = heapq.heappop(heap)
        if dist[v] < d:
            continue
        for edge in graph[v]:
            candidate = d + edge.cost
            if dist[edge.to] > candidate:
                dist[edge.to] = candidate
                heapq.heappush(heap, (candidate, edge.to))
    return dist