"""Street graph primitives and the street list reader/route writer."""

from postman_route.graph.street_graph import Adjacency, StreetGraph

__all__ = ["Adjacency", "StreetGraph"]
