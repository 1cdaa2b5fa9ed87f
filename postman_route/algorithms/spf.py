"""Single-source shortest distances (Dijkstra) over street lengths."""

from __future__ import annotations

import math
from heapq import heappop, heappush
from typing import List, Tuple

from postman_route.graph.street_graph import StreetGraph
from postman_route.types import DistanceMap, Vertex


def dijkstra(graph: StreetGraph, source: Vertex) -> DistanceMap:
    """Compute shortest distances from ``source`` to every vertex.

    The frontier is a heap of ``(distance, vertex)`` pairs, so equal distances
    are ordered by vertex id. Improved vertices are pushed again and outdated
    entries are skipped on pop. Parallel streets are each relaxed.

    Args:
        graph: Street graph with non-negative lengths.
        source: Vertex to measure from.

    Returns:
        Distance for every vertex of the graph; unreachable ones are ``math.inf``.

    Raises:
        KeyError: If ``source`` is not in the graph.
    """
    adjacency = graph._adj  # type: ignore[attr-defined]
    if source not in adjacency:
        raise KeyError(f"Source node '{source}' is not in the graph.")

    distances: DistanceMap = {vertex: math.inf for vertex in adjacency}
    distances[source] = 0.0
    min_pq: List[Tuple[float, Vertex]] = [(0.0, source)]

    while min_pq:
        current_dist, vertex = heappop(min_pq)
        if current_dist > distances[vertex]:
            continue

        for neighbor, keydict in adjacency[vertex].items():
            for attr in keydict.values():
                new_dist = current_dist + attr["length"]
                if new_dist < distances[neighbor]:
                    distances[neighbor] = new_dist
                    heappush(min_pq, (new_dist, neighbor))

    return distances
