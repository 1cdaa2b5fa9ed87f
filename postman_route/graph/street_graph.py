"""Undirected street multigraph with an indexed edge registry.

`StreetGraph` extends `networkx.MultiGraph` so that every street receives a
globally unique, monotonically increasing integer key. The key registry acts
as an edge arena: a single street can be looked up and consumed by its key
without scanning or disturbing its parallel twins. Iteration helpers expose a
deterministic *natural order* (ascending vertex id, then ascending key) that
every first-match rule of the pipeline relies on.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

import networkx as nx

from postman_route.types import Length, Vertex

EdgeKey = int
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[Vertex, Vertex, EdgeKey, AttrDict]


class Adjacency(NamedTuple):
    """One entry of a vertex's adjacency: a street leading to ``neighbor``."""

    neighbor: Vertex
    length: Length
    label: str
    key: EdgeKey


class StreetGraph(nx.MultiGraph):
    """A street network: intersections joined by (possibly parallel) streets.

    This class adds to ``networkx.MultiGraph``:
      - Globally unique integer edge keys that are never reused.
      - ``add_street``/``remove_street`` working on ``length``/``label``
        attributes, where removal takes exactly one street.
      - Adjacency views in natural order (see module docstring).
      - ``copy()`` performing a pickle-based deep copy.

    Vertices are created implicitly when a street references them.

    Inherits from:
        networkx.MultiGraph
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize a StreetGraph.

        Args:
            *args: Positional arguments forwarded to the MultiGraph constructor.
            **kwargs: Keyword arguments forwarded to the MultiGraph constructor.

        Attributes:
            _edges: Map edge key to ``(u, v, key, attribute_dict)``.
        """
        self._edges: Dict[EdgeKey, EdgeTuple] = {}
        # Only advances; removed streets do not give their keys back.
        self._next_edge_id: int = 0
        super().__init__(*args, **kwargs)

    def new_edge_key(self, u: Vertex, v: Vertex) -> int:  # type: ignore[override]
        """Return a new unique integer edge key.

        Signature matches NetworkX's ``MultiGraph.new_edge_key(self, u, v)``.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return next_edge_id

    def copy(self) -> StreetGraph:  # type: ignore[override]
        """Return a deep copy sharing no attribute dictionaries with this graph.

        The key counter is copied too, so keys added to the copy never clash
        with keys of the original.
        """
        return loads(dumps(self))

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: Vertex,
        v_for_edge: Vertex,
        key: Optional[EdgeKey] = None,
        **attr: Any,
    ) -> EdgeKey:
        """Add an undirected edge, registering it under a unique key.

        Args:
            u_for_edge: One endpoint; created if missing.
            v_for_edge: Other endpoint; created if missing.
            key: Edge key. NetworkX helpers pass one obtained from
                ``new_edge_key``; a new key is generated if None.
            **attr: Arbitrary edge attributes.

        Returns:
            The key associated with the new edge.
        """
        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self._adj[u_for_edge][v_for_edge][key],
        )
        return key

    def add_street(self, u: Vertex, v: Vertex, length: Length, label: str) -> EdgeKey:
        """Insert one street between ``u`` and ``v``.

        Repeated calls with the same endpoints create parallel streets. The
        length is stored as given; non-negativity is the caller's concern.

        Returns:
            The key of the new street.
        """
        return self.add_edge(u, v, length=length, label=label)

    def remove_edge(
        self,
        u: Vertex,
        v: Vertex,
        key: Optional[EdgeKey] = None,
    ) -> None:
        """Remove one edge between ``u`` and ``v``.

        If ``key`` is given, remove that edge. Otherwise remove the first edge
        in natural order (the lowest key).

        Raises:
            ValueError: If no such edge exists.
        """
        if u not in self._adj or v not in self._adj[u]:
            raise ValueError(f"No street between '{u}' and '{v}' to remove.")
        if key is None:
            key = min(self._adj[u][v])
        elif key not in self._adj[u][v]:
            raise ValueError(f"No street with id='{key}' between '{u}' and '{v}'.")
        super().remove_edge(u, v, key=key)
        del self._edges[key]

    def remove_street(self, u: Vertex, v: Vertex) -> None:
        """Remove exactly one street between ``u`` and ``v``.

        When parallel streets exist, the first in natural order goes; length and
        label are not considered.
        """
        self.remove_edge(u, v)

    def remove_edge_by_id(self, key: EdgeKey) -> None:
        """Remove a street by its unique key.

        Raises:
            ValueError: If no edge with this key exists in the graph.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        u, v, _, _ = self._edges[key]
        self.remove_edge(u, v, key=key)

    #
    # Queries in natural order
    #
    def vertices(self) -> List[Vertex]:
        """Return all vertices in ascending id order."""
        return sorted(self._adj)

    def adjacent_streets(self, v: Vertex) -> List[Adjacency]:
        """Return the adjacency entries of ``v`` in natural order.

        A self-loop is listed twice, so the result length equals ``degree(v)``.

        Raises:
            KeyError: If ``v`` is not a vertex.
        """
        entries: List[Adjacency] = []
        for neighbor, keydict in sorted(self._adj[v].items()):
            for key in sorted(keydict):
                attr = keydict[key]
                entry = Adjacency(neighbor, attr["length"], attr["label"], key)
                entries.append(entry)
                if neighbor == v:
                    entries.append(entry)
        return entries

    def first_street_between(self, u: Vertex, v: Vertex) -> Optional[Adjacency]:
        """Return the first street from ``u`` to ``v`` in natural order, if any."""
        if u not in self._adj or v not in self._adj[u]:
            return None
        keydict = self._adj[u][v]
        key = min(keydict)
        return Adjacency(v, keydict[key]["length"], keydict[key]["label"], key)

    def get_edges(self) -> Dict[EdgeKey, EdgeTuple]:
        """Retrieve a dictionary of all edges by their keys."""
        return self._edges

    def odd_degree_vertices(self) -> List[Vertex]:
        """Return vertices of odd degree in ascending id order."""
        return [v for v in self.vertices() if self.degree(v) % 2 == 1]

    def total_length(self) -> float:
        """Return the summed length of all streets."""
        return float(sum(attr["length"] for _, _, _, attr in self.get_edges().values()))
