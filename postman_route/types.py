"""Shared aliases and enums for the route inspection pipeline."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Union

#: Intersection identifier.
Vertex = int

#: Street length (non-negative).
Length = Union[int, float]

#: Shortest known distance from a fixed source to every vertex.
DistanceMap = Dict[Vertex, float]


class PairingStrategy(IntEnum):
    """How odd-degree intersections are paired before their paths are doubled."""

    #: Pair odd vertices in discovery order: (1st, 2nd), (3rd, 4th), ...
    SEQUENTIAL = 1
    #: Minimum-weight perfect matching over shortest distances.
    MIN_WEIGHT = 2

    @classmethod
    def from_string(cls, value: str) -> "PairingStrategy":
        """Parse a string into a PairingStrategy enum value.

        Args:
            value: Case-insensitive name (e.g., "sequential", "MIN_WEIGHT").
                Hyphens are accepted in place of underscores.

        Returns:
            The corresponding PairingStrategy member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.strip().upper().replace("-", "_")]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid pairing '{value}'. Valid values are: {valid}"
            ) from None
