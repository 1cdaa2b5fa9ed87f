"""Street list parsing and route file rendering.

Input is one street per line::

    <intersection_a:int> <intersection_b:int> <length:float> <street name...>

The street name is the rest of the line with surrounding whitespace removed
and may be empty. Lines whose first three fields do not parse, or whose
length is negative or not finite, are dropped. Output is one traversed
street per line::

    <from:int> <to:int> <street name>
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from postman_route.errors import InputUnavailableError, OutputUnavailableError
from postman_route.graph.street_graph import StreetGraph
from postman_route.logging import get_logger
from postman_route.types import Vertex

logger = get_logger(__name__)

StreetRecord = Tuple[Vertex, Vertex, float, str]


def parse_street_line(line: str) -> Optional[StreetRecord]:
    """Parse one street line.

    Returns:
        ``(u, v, length, label)`` or ``None`` when the line is malformed: fewer
        than three fields, non-integer intersections, or a length that is not
        a finite non-negative number. A missing name parses as ``""``.
    """
    tokens = line.split(None, 3)
    if len(tokens) < 3:
        return None
    try:
        u = int(tokens[0])
        v = int(tokens[1])
        length = float(tokens[2])
    except ValueError:
        return None
    if not math.isfinite(length) or length < 0:
        return None
    label = tokens[3].strip() if len(tokens) == 4 else ""
    return u, v, length, label


def edgelist_to_graph(
    lines: Iterable[str], graph: Optional[StreetGraph] = None
) -> StreetGraph:
    """Build (or extend) a StreetGraph from street lines.

    Args:
        lines: Text lines in the street list format.
        graph: Optional graph to add streets to; a new one is created if None.

    Returns:
        The populated graph.
    """
    graph = StreetGraph() if graph is None else graph

    skipped = 0
    for line in lines:
        record = parse_street_line(line)
        if record is None:
            if line.strip():
                skipped += 1
            continue
        u, v, length, label = record
        graph.add_street(u, v, length, label)

    if skipped:
        logger.debug(f"Skipped {skipped} malformed street line(s)")
    return graph


def read_street_file(path: Union[str, Path], encoding: str = "utf-8") -> StreetGraph:
    """Load a street network from a file.

    Raises:
        InputUnavailableError: If the file cannot be opened or decoded.
    """
    path = Path(path)
    logger.info(f"Loading street list from: {path}")
    try:
        with path.open("r", encoding=encoding) as fh:
            graph = edgelist_to_graph(fh)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailableError(
            f"Cannot read street list '{path}': {exc}"
        ) from exc
    logger.info(
        f"Loaded {graph.number_of_edges()} streets between "
        f"{graph.number_of_nodes()} intersections"
    )
    return graph


def render_route(legs: Iterable[Tuple[Vertex, Vertex, str]]) -> str:
    """Render route legs as text, one ``from to name`` line per leg."""
    return "".join(f"{leg[0]} {leg[1]} {leg[2]}\n" for leg in legs)


def write_route_file(
    path: Union[str, Path],
    legs: Iterable[Tuple[Vertex, Vertex, str]],
    encoding: str = "utf-8",
) -> None:
    """Write the route to ``path``.

    The whole text is rendered before the file is opened.

    Raises:
        OutputUnavailableError: If the file cannot be written.
    """
    path = Path(path)
    text = render_route(legs)
    try:
        path.write_text(text, encoding=encoding)
    except OSError as exc:
        raise OutputUnavailableError(f"Cannot write route to '{path}': {exc}") from exc
    logger.info(f"Route written to: {path}")


def write_summary_file(
    path: Union[str, Path], summary: Dict[str, Any], encoding: str = "utf-8"
) -> None:
    """Write route statistics to ``path`` as indented JSON.

    Raises:
        OutputUnavailableError: If the file cannot be written.
    """
    path = Path(path)
    text = json.dumps(summary, indent=2)
    try:
        path.write_text(text, encoding=encoding)
    except OSError as exc:
        raise OutputUnavailableError(
            f"Cannot write summary to '{path}': {exc}"
        ) from exc
    logger.info(f"Summary written to: {path}")
