"""Eulerian circuit extraction (Hierholzer's algorithm)."""

from __future__ import annotations

from collections import deque
from typing import Deque, List

from postman_route.graph.street_graph import StreetGraph
from postman_route.logging import get_logger
from postman_route.types import Vertex

logger = get_logger(__name__)


def eulerian_circuit(graph: StreetGraph, start: Vertex) -> List[Vertex]:
    """Extract a closed walk using every street of ``graph`` exactly once.

    The graph is consumed: each street is removed by key as it is walked, so
    on return the graph has no streets left and must not be reused. From the
    vertex on top of the stack the first street in natural order is taken;
    a vertex with no streets left is popped onto the front of the circuit.

    The graph must be connected with every degree even; this is not checked
    here, and violating it yields a walk that misses streets or is not closed.

    Args:
        graph: Augmented street graph to consume.
        start: Vertex the circuit starts and ends at.

    Returns:
        Vertices of the circuit, first and last equal to ``start``. It has one
        more entry than the graph had streets.

    Raises:
        KeyError: If ``start`` is not in the graph.
    """
    adjacency = graph._adj  # type: ignore[attr-defined]
    if start not in adjacency:
        raise KeyError(f"Start node '{start}' is not in the graph.")

    edge_count = graph.number_of_edges()
    stack: List[Vertex] = [start]
    circuit: Deque[Vertex] = deque()

    while stack:
        top = stack[-1]
        streets = adjacency[top]
        if streets:
            neighbor = min(streets)
            stack.append(neighbor)
            graph.remove_edge_by_id(min(streets[neighbor]))
        else:
            circuit.appendleft(stack.pop())

    if len(circuit) != edge_count + 1:
        logger.warning(
            f"Circuit covers {len(circuit) - 1} of {edge_count} streets; "
            f"the graph was not Eulerian"
        )
    return list(circuit)
