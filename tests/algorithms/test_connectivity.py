import networkx as nx
import pytest

from postman_route.algorithms.connectivity import is_connected, reachable_vertices
from postman_route.graph.street_graph import StreetGraph


def test_triangle_is_connected(triangle):
    assert is_connected(triangle)


def test_two_triangles_not_connected(two_triangles):
    assert not is_connected(two_triangles)
    assert not is_connected(two_triangles, root=5)
    assert reachable_vertices(two_triangles, 5) == {4, 5, 6}


def test_single_street_and_self_loop():
    g = StreetGraph()
    g.add_street(1, 1, 1.0, "Loop")
    assert is_connected(g)
    g.add_street(2, 3, 1.0, "Elsewhere")
    assert not is_connected(g)


def test_empty_graph_raises():
    with pytest.raises(ValueError):
        is_connected(StreetGraph())


def test_unknown_root_raises(triangle):
    with pytest.raises(KeyError):
        reachable_vertices(triangle, 42)


def test_long_path_does_not_hit_recursion_limit():
    g = StreetGraph()
    for i in range(20_000):
        g.add_street(i, i + 1, 1.0, f"s{i}")
    assert is_connected(g)


def test_result_is_independent_of_root(two_triangles):
    assert {is_connected(two_triangles, root=v) for v in two_triangles.vertices()} == {
        False
    }


@pytest.mark.parametrize("seed", range(10))
def test_matches_networkx(seed, make_random_graph):
    g = make_random_graph(seed=seed, nodes=7, extra_streets=4)
    assert is_connected(g) == nx.is_connected(g)
    # Drop the street set of one vertex to force possible disconnection
    v = g.vertices()[seed % 7]
    for key in [k for k, (a, b, _, _) in g.get_edges().items() if v in (a, b)]:
        g.remove_edge_by_id(key)
    assert is_connected(g) == nx.is_connected(g)
