"""Reachability check over a street graph."""

from __future__ import annotations

from typing import Optional, Set

from postman_route.graph.street_graph import StreetGraph
from postman_route.types import Vertex


def reachable_vertices(graph: StreetGraph, root: Vertex) -> Set[Vertex]:
    """Return every vertex reachable from ``root`` by depth-first traversal.

    Uses an explicit stack, so depth is not bounded by the interpreter's
    recursion limit.

    Raises:
        KeyError: If ``root`` is not in the graph.
    """
    adjacency = graph._adj  # type: ignore[attr-defined]
    if root not in adjacency:
        raise KeyError(f"Vertex '{root}' is not in the graph.")

    visited: Set[Vertex] = {root}
    stack = [root]
    while stack:
        vertex = stack.pop()
        for neighbor in adjacency[vertex]:
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append(neighbor)
    return visited


def is_connected(graph: StreetGraph, root: Optional[Vertex] = None) -> bool:
    """Return True if every vertex is reachable from ``root``.

    Args:
        graph: A non-empty street graph.
        root: Vertex to start from; defaults to the first vertex in natural order.

    Raises:
        ValueError: If the graph has no vertices.
    """
    if graph.number_of_nodes() == 0:
        raise ValueError("Connectivity is undefined for an empty graph.")
    if root is None:
        root = min(graph._adj)  # type: ignore[attr-defined]
    return len(reachable_vertices(graph, root)) == graph.number_of_nodes()
