"""postman-route: closed routes covering every street of a road network.

Solves the route inspection (Chinese Postman) problem on an undirected street
multigraph: odd-degree intersections are evened out by doubling shortest paths
and an Eulerian circuit of the result is labelled with street names.

Primary API:
    solve() - Route over an in-memory StreetGraph
    solve_file() - Read a street list, solve, write the route file
    StreetGraph - Street multigraph (networkx.MultiGraph subclass)
    SolverConfig - Solver settings

Example:
    from postman_route import StreetGraph, solve

    g = StreetGraph()
    g.add_street(1, 2, 1.0, "A")
    g.add_street(2, 3, 1.0, "B")
    g.add_street(3, 1, 1.0, "C")

    for leg in solve(g, start=1).route:
        print(leg.source, leg.target, leg.label)
"""

from __future__ import annotations

from postman_route import cli, logging
from postman_route._version import __version__
from postman_route.algorithms import RouteLeg, RouteSummary
from postman_route.config import SolverConfig
from postman_route.errors import (
    ConfigError,
    DisconnectedGraphError,
    EmptyGraphError,
    InputUnavailableError,
    OutputUnavailableError,
    PostmanError,
    UnknownVertexError,
)
from postman_route.graph import Adjacency, StreetGraph
from postman_route.solver import PostmanSolution, solve, solve_file
from postman_route.types import PairingStrategy

__all__ = [
    # Version
    "__version__",
    # Model
    "StreetGraph",
    "Adjacency",
    # Solving
    "solve",
    "solve_file",
    "PostmanSolution",
    "RouteLeg",
    "RouteSummary",
    "SolverConfig",
    "PairingStrategy",
    # Errors
    "PostmanError",
    "InputUnavailableError",
    "OutputUnavailableError",
    "DisconnectedGraphError",
    "EmptyGraphError",
    "UnknownVertexError",
    "ConfigError",
    # Utilities
    "cli",
    "logging",
]
