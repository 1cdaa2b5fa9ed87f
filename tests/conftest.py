"""Shared street-graph fixtures and helpers.

Fixtures are small hand-checked networks; ``random_street_graph`` builds
seeded random connected multigraphs for property-style tests.
"""

from __future__ import annotations

import random
from typing import Iterable, Tuple

import pytest

from postman_route.graph.street_graph import StreetGraph
from postman_route.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_console_logging():
    """Rebind the package console handler once a test has finished."""
    yield
    configure_logging()


def build_graph(streets: Iterable[Tuple[int, int, float, str]]) -> StreetGraph:
    g = StreetGraph()
    for u, v, length, label in streets:
        g.add_street(u, v, length, label)
    return g


def random_street_graph(
    seed: int, nodes: int = 8, extra_streets: int = 6, self_loops: bool = False
) -> StreetGraph:
    """Connected random multigraph: a random spanning tree plus extra streets."""
    rng = random.Random(seed)
    g = StreetGraph()
    order = list(range(1, nodes + 1))
    rng.shuffle(order)
    for i in range(1, nodes):
        parent = order[rng.randrange(i)]
        g.add_street(parent, order[i], rng.randint(1, 9), f"T{i}")
    for j in range(extra_streets):
        u = rng.randint(1, nodes)
        v = rng.randint(1, nodes)
        if u == v and not self_loops:
            continue
        g.add_street(u, v, rng.randint(1, 9), f"X{j}")
    return g


@pytest.fixture
def triangle():
    #        [1.0] A
    #   1 ──────────── 2
    #    \            /
    # [1.0] C      B [1.0]
    #      \        /
    #         3
    return build_graph([(1, 2, 1.0, "A"), (2, 3, 1.0, "B"), (3, 1, 1.0, "C")])


@pytest.fixture
def path3():
    #   1 ──A── 2 ──B── 3   (odd: 1, 3)
    return build_graph([(1, 2, 1.0, "A"), (2, 3, 1.0, "B")])


@pytest.fixture
def square_cycle():
    #        [1]
    #    1 ─────── 2
    #    │         │
    # [4]│         │[2]
    #    │         │
    #    4 ─────── 3
    #        [3]
    return build_graph(
        [(1, 2, 1, "N"), (2, 3, 2, "E"), (3, 4, 3, "S"), (4, 1, 4, "W")]
    )


@pytest.fixture
def equal_square():
    # Two equal-length routes from 1 to 4: via 2 and via 3.
    return build_graph(
        [(1, 2, 1, "a"), (2, 4, 1, "b"), (1, 3, 1, "c"), (3, 4, 1, "d")]
    )


@pytest.fixture
def two_triangles():
    return build_graph(
        [
            (1, 2, 1.0, "A"),
            (2, 3, 1.0, "B"),
            (3, 1, 1.0, "C"),
            (4, 5, 1.0, "D"),
            (5, 6, 1.0, "E"),
            (6, 4, 1.0, "F"),
        ]
    )


@pytest.fixture
def dumbbell():
    # Two pendant pairs joined by a long bridge:
    #   1 ─┐            ┌─ 2
    #      7 ──[10]──── 8
    #   3 ─┘            └─ 4
    # Odd vertices: 1, 2, 3, 4, 7, 8.
    return build_graph(
        [
            (1, 7, 1, "L1"),
            (3, 7, 1, "L3"),
            (7, 8, 10, "Bridge"),
            (2, 8, 1, "R2"),
            (4, 8, 1, "R4"),
        ]
    )


@pytest.fixture
def make_graph():
    return build_graph


@pytest.fixture
def make_random_graph():
    return random_street_graph
