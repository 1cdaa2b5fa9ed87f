"""End-to-end route inspection pipeline.

``solve`` takes a street graph and a start intersection and returns a closed
route walking every street at least once:

1. check the graph is non-empty, contains the start and is connected;
2. double shortest paths between paired odd-degree intersections in a copy;
3. consume the copy to extract an Eulerian circuit;
4. label the circuit against the original streets.

``solve_file`` wraps the same steps with reading the street list and writing
the route file, plus an optional JSON summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
from typing import List, Optional, Union

from postman_route.algorithms.augment import VertexPair, augment_odd_vertices
from postman_route.algorithms.connectivity import is_connected
from postman_route.algorithms.euler import eulerian_circuit
from postman_route.algorithms.route import (
    RouteLeg,
    RouteSummary,
    emit_route,
    summarize_route,
)
from postman_route.config import DEFAULT_CONFIG, SolverConfig
from postman_route.errors import (
    DisconnectedGraphError,
    EmptyGraphError,
    OutputUnavailableError,
    UnknownVertexError,
)
from postman_route.graph.io import (
    read_street_file,
    write_route_file,
    write_summary_file,
)
from postman_route.graph.street_graph import StreetGraph
from postman_route.logging import get_logger
from postman_route.types import Vertex

logger = get_logger(__name__)


@dataclass
class PostmanSolution:
    """Result of a solver run.

    Attributes:
        circuit: Closed walk of intersections, starting and ending at the start.
        route: One labelled leg per step of the circuit.
        summary: Headline statistics.
        pairs: Odd-degree intersections whose connecting paths were doubled.
    """

    circuit: List[Vertex]
    route: List[RouteLeg]
    summary: RouteSummary
    pairs: List[VertexPair]


def solve(
    graph: StreetGraph, start: Vertex, config: Optional[SolverConfig] = None
) -> PostmanSolution:
    """Compute a closed route over every street of ``graph`` from ``start``.

    ``graph`` is not modified.

    Raises:
        EmptyGraphError: If the graph has no streets.
        UnknownVertexError: If ``start`` is not an intersection of the graph.
        DisconnectedGraphError: If some streets are unreachable from others.
    """
    config = config or DEFAULT_CONFIG

    if graph.number_of_edges() == 0:
        raise EmptyGraphError("The street network has no streets")
    if start not in graph:
        raise UnknownVertexError(
            f"Start intersection {start} is not in the street network"
        )
    if not is_connected(graph):
        raise DisconnectedGraphError("The street network is not connected")

    augmentation = augment_odd_vertices(graph, pairing=config.pairing)
    circuit = eulerian_circuit(augmentation.graph, start)
    logger.info(f"Eulerian circuit visits {len(circuit)} intersections")

    route = emit_route(circuit, graph)
    summary = summarize_route(route, graph, start, augmentation.added_length)
    logger.debug(f"Route summary: {summary.to_dict()}")
    return PostmanSolution(
        circuit=circuit, route=route, summary=summary, pairs=augmentation.pairs
    )


def solve_file(
    input_path: Union[str, Path],
    start: Vertex,
    output_path: Union[str, Path],
    config: Optional[SolverConfig] = None,
    summary_path: Optional[Union[str, Path]] = None,
) -> PostmanSolution:
    """Read a street list, solve it, and write the route file.

    Nothing is written unless the whole route was computed. With
    ``summary_path``, the statistics are written there first; if the route
    file then cannot be written, the summary file is removed again.

    Raises:
        InputUnavailableError: If the street list cannot be read.
        OutputUnavailableError: If the route or summary file cannot be written.
        PostmanError: Any failure raised by :func:`solve`.
    """
    config = config or DEFAULT_CONFIG
    _start_time = perf_counter()

    graph = read_street_file(input_path, encoding=config.encoding)
    solution = solve(graph, start, config)

    if summary_path is not None:
        write_summary_file(
            summary_path, solution.summary.to_dict(), encoding=config.encoding
        )
    try:
        write_route_file(
            output_path,
            ((leg.source, leg.target, leg.label) for leg in solution.route),
            encoding=config.encoding,
        )
    except OutputUnavailableError:
        if summary_path is not None:
            Path(summary_path).unlink(missing_ok=True)
        raise

    logger.info(f"Route computed in {perf_counter() - _start_time:.3f} s")
    return solution
