"""Route inspection algorithms: connectivity, shortest paths, augmentation,
Eulerian circuit extraction and route emission."""

from postman_route.algorithms.augment import AugmentationResult, augment_odd_vertices
from postman_route.algorithms.connectivity import is_connected
from postman_route.algorithms.euler import eulerian_circuit
from postman_route.algorithms.route import RouteLeg, RouteSummary, emit_route
from postman_route.algorithms.spf import dijkstra

__all__ = [
    "AugmentationResult",
    "RouteLeg",
    "RouteSummary",
    "augment_odd_vertices",
    "dijkstra",
    "emit_route",
    "eulerian_circuit",
    "is_connected",
]
