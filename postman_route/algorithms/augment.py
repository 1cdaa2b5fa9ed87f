"""Make every intersection even by doubling shortest paths between odd ones.

By the handshake lemma a finite graph has an even number of odd-degree
vertices. They are paired, and for each pair the streets of a shortest path
between them are duplicated in a deep copy of the graph. Afterwards every
vertex of the copy has even degree, so a connected copy admits an Eulerian
circuit. The original graph is never modified.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set, Tuple

import networkx as nx

from postman_route.algorithms.spf import dijkstra
from postman_route.graph.street_graph import Adjacency, StreetGraph
from postman_route.logging import get_logger
from postman_route.types import DistanceMap, PairingStrategy, Vertex

logger = get_logger(__name__)

VertexPair = Tuple[Vertex, Vertex]
PathStep = Tuple[Vertex, Adjacency]


@dataclass
class AugmentationResult:
    """Outcome of odd-vertex augmentation.

    Attributes:
        graph: Deep copy of the input with the doubled streets added.
        odd_vertices: Odd-degree vertices of the input, in natural order.
        pairs: The ``(source, target)`` pairs whose paths were doubled.
        added_length: Total length of the doubled streets.
        added_streets: Number of doubled streets.
    """

    graph: StreetGraph
    odd_vertices: List[Vertex] = field(default_factory=list)
    pairs: List[VertexPair] = field(default_factory=list)
    added_length: float = 0.0
    added_streets: int = 0


def odd_degree_vertices(graph: StreetGraph) -> List[Vertex]:
    """Return the odd-degree vertices of ``graph`` in natural order."""
    return graph.odd_degree_vertices()


def pair_sequential(odd_vertices: List[Vertex]) -> List[VertexPair]:
    """Pair vertices in order: ``(v0, v1), (v2, v3), ...``.

    Raises:
        ValueError: If the number of vertices is odd.
    """
    if len(odd_vertices) % 2:
        raise ValueError(
            f"Cannot pair an odd number of vertices ({len(odd_vertices)})."
        )
    return [
        (odd_vertices[i], odd_vertices[i + 1]) for i in range(0, len(odd_vertices), 2)
    ]


def pair_min_weight(
    odd_vertices: List[Vertex], distances: Dict[Vertex, DistanceMap]
) -> List[VertexPair]:
    """Pair vertices by a minimum-weight perfect matching of shortest distances.

    Args:
        odd_vertices: Vertices to pair, in natural order.
        distances: Distance map from each vertex in ``odd_vertices``.

    Returns:
        Pairs oriented and sorted by the position of their vertices in
        ``odd_vertices``.

    Raises:
        ValueError: If the vertices cannot all be paired.
    """
    if len(odd_vertices) % 2:
        raise ValueError(
            f"Cannot pair an odd number of vertices ({len(odd_vertices)})."
        )
    position = {v: i for i, v in enumerate(odd_vertices)}

    complete = nx.Graph()
    complete.add_nodes_from(odd_vertices)
    for i, u in enumerate(odd_vertices):
        for v in odd_vertices[i + 1 :]:
            dist = distances[u][v]
            if math.isfinite(dist):
                complete.add_edge(u, v, weight=dist)

    matching = nx.min_weight_matching(complete, weight="weight")
    pairs = [tuple(sorted(pair, key=position.__getitem__)) for pair in matching]
    if 2 * len(pairs) != len(odd_vertices):
        raise ValueError("Odd-degree vertices cannot be perfectly matched.")
    return sorted(pairs, key=lambda pair: position[pair[0]])  # type: ignore[return-value]


def _tight_streets(
    graph: StreetGraph, distances: DistanceMap, vertex: Vertex
) -> List[Adjacency]:
    """Streets of ``vertex`` minimising ``distances[neighbor] + length``, in natural order."""
    streets = graph.adjacent_streets(vertex)
    costs = [distances[s.neighbor] + s.length for s in streets]
    best = min(costs, default=math.inf)
    return [s for s, cost in zip(streets, costs) if cost == best]


def reconstruct_path(
    graph: StreetGraph, distances: DistanceMap, source: Vertex, target: Vertex
) -> List[PathStep]:
    """Walk back from ``target`` to ``source`` along shortest-path streets.

    No predecessor map is needed: at each vertex the street minimising
    ``distances[neighbor] + length`` is taken, the first one in natural order
    on ties. With positive lengths this walk never revisits a vertex. Zero
    length streets can lead it into a vertex whose only minimising streets go
    back to the walk; it then backs up and takes the next minimising street.

    Args:
        graph: The graph ``distances`` was computed on.
        distances: Shortest distances from ``source``.
        source: Where the walk ends.
        target: Where the walk starts.

    Returns:
        Steps ``(vertex, street)`` from ``target`` towards ``source``; each
        street leads from ``vertex`` to ``street.neighbor``.

    Raises:
        ValueError: If ``target`` is unreachable or no walk reaches ``source``.
    """
    if not math.isfinite(distances.get(target, math.inf)):
        raise ValueError(f"Vertex '{target}' is unreachable from '{source}'.")

    steps: List[PathStep] = []
    seen: Set[Vertex] = {target}
    stack: List[Tuple[Vertex, Iterator[Adjacency]]] = [
        (target, iter(_tight_streets(graph, distances, target)))
    ]
    while stack:
        vertex, streets = stack[-1]
        if vertex == source:
            return steps
        for street in streets:
            if street.neighbor not in seen:
                seen.add(street.neighbor)
                steps.append((vertex, street))
                stack.append(
                    (street.neighbor, iter(_tight_streets(graph, distances, street.neighbor)))
                )
                break
        else:
            stack.pop()
            if steps:
                steps.pop()

    raise ValueError(f"No shortest-path walk leads from '{target}' to '{source}'.")


def augment_odd_vertices(
    graph: StreetGraph, pairing: PairingStrategy = PairingStrategy.SEQUENTIAL
) -> AugmentationResult:
    """Return an augmented deep copy of ``graph`` in which every degree is even.

    Args:
        graph: Connected street graph. Left untouched.
        pairing: How odd-degree vertices are paired.

    Returns:
        AugmentationResult holding the augmented copy and what was added.
    """
    odd = odd_degree_vertices(graph)
    logger.info(f"Found {len(odd)} odd-degree intersections")

    augmented = graph.copy()
    result = AugmentationResult(graph=augmented, odd_vertices=odd)
    if not odd:
        return result

    if pairing == PairingStrategy.MIN_WEIGHT:
        distances = {v: dijkstra(graph, v) for v in odd}
        pairs = pair_min_weight(odd, distances)
    else:
        distances = {}
        pairs = pair_sequential(odd)
    result.pairs = pairs
    logger.debug(f"Pairing ({pairing.name.lower()}): {pairs}")

    for source, target in pairs:
        dist_map = distances.get(source)
        if dist_map is None:
            dist_map = dijkstra(graph, source)
        for vertex, street in reconstruct_path(graph, dist_map, source, target):
            augmented.add_street(street.neighbor, vertex, street.length, street.label)
            result.added_length += street.length
            result.added_streets += 1

    logger.info(
        f"Doubled {result.added_streets} streets "
        f"(extra length {result.added_length:g}) for {len(pairs)} pairs"
    )
    return result
