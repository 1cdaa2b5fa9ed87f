"""Turn a vertex circuit into labelled route legs and summarize them."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, NamedTuple, Sequence

from postman_route.graph.street_graph import StreetGraph
from postman_route.types import Length, Vertex


class RouteLeg(NamedTuple):
    """One traversed street of the route."""

    source: Vertex
    target: Vertex
    label: str
    length: Length


def emit_route(circuit: Sequence[Vertex], original: StreetGraph) -> List[RouteLeg]:
    """Resolve each step of ``circuit`` to a street of the original graph.

    The circuit is closed (its last vertex is its first), so its consecutive
    pairs already lead back to the start. Each pair takes the first original
    street between the two vertices in natural order. When parallel streets
    join the pair, doubled traversals may therefore repeat the same name.

    Args:
        circuit: Closed walk of vertices.
        original: The unaugmented graph.

    Returns:
        One leg per consecutive pair; empty for a circuit of fewer than two vertices.

    Raises:
        ValueError: If a pair has no street between them in ``original``.
    """
    legs: List[RouteLeg] = []
    for source, target in zip(circuit, circuit[1:]):
        street = original.first_street_between(source, target)
        if street is None:
            raise ValueError(f"No street joins '{source}' and '{target}'.")
        legs.append(RouteLeg(source, target, street.label, street.length))
    return legs


@dataclass(frozen=True)
class RouteSummary:
    """Headline statistics of a route.

    Attributes:
        legs: Number of streets walked, counting repeats.
        total_distance: Length of the whole route.
        street_distance: Length of all original streets, each once.
        deadhead_distance: Extra length walked on repeated streets.
        streets: Number of original streets.
        repeated_legs: Legs beyond the first traversal of each street.
        odd_vertices: Odd-degree intersections in the original network.
        start: Vertex the route starts and ends at.
    """

    legs: int
    total_distance: float
    street_distance: float
    deadhead_distance: float
    streets: int
    repeated_legs: int
    odd_vertices: int
    start: Vertex

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def summarize_route(
    route: Sequence[RouteLeg],
    original: StreetGraph,
    start: Vertex,
    added_length: float,
) -> RouteSummary:
    """Compute headline statistics for ``route`` over ``original``.

    Distances come from the graphs rather than the legs: a leg carries the
    length of the first matching street, which differs from the street
    actually walked when parallel streets have different lengths.

    Args:
        route: Emitted legs.
        original: The unaugmented graph.
        start: Vertex the route starts and ends at.
        added_length: Total length of the doubled streets.
    """
    street_distance = original.total_length()
    total = street_distance + added_length
    streets = original.number_of_edges()
    return RouteSummary(
        legs=len(route),
        total_distance=total,
        street_distance=street_distance,
        deadhead_distance=float(added_length),
        streets=streets,
        repeated_legs=max(len(route) - streets, 0),
        odd_vertices=len(original.odd_degree_vertices()),
        start=start,
    )

