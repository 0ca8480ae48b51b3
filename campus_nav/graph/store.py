"""In-memory campus map.

This module defines the MapGraph type used throughout the project: an
append-only sequence of locations plus an index-keyed adjacency list
of roads. Every undirected road is stored as two directed records with
the same distance.
"""

from __future__ import annotations

import math
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..domain.errors import InvalidIndexError, InvalidWeightError
from ..domain.models import Location, Position, Road


class MapGraph:
    """Locations and the weighted, undirected roads between them.

    The graph is filled during a build phase and read-only afterwards.
    It has no internal locking.
    """

    def __init__(self) -> None:
        self._locations: List[Location] = []
        self._adjacency: Dict[int, List[Road]] = {}
        # (a, b, distance) in insertion order, one entry per logical road
        self._roads: List[Tuple[int, int, float]] = []

    def __len__(self) -> int:
        return len(self._locations)

    def __repr__(self) -> str:
        return f"MapGraph(locations={len(self._locations)}, roads={len(self._roads)})"

    def add_location(
        self,
        name: str,
        description: str = "",
        position: Optional[Position] = None,
    ) -> int:
        """Append a location and return its index."""
        self._locations.append(Location(name, description, position))
        return len(self._locations) - 1

    def add_road(self, a: int, b: int, distance: float) -> None:
        """Connect two existing locations in both directions.

        Args:
            a: Index of the first location.
            b: Index of the second location.
            distance: Road length in kilometers, must be finite and >= 0.

        Raises:
            InvalidWeightError: If the distance is negative or not finite.
            InvalidIndexError: If either endpoint is not a known location.
        """
        distance = float(distance)
        if not math.isfinite(distance) or distance < 0:
            raise InvalidWeightError(
                f"Road distance must be a finite non-negative number, got {distance}",
                distance=distance,
            )
        self.check_index(a)
        self.check_index(b)

        self._adjacency.setdefault(a, []).append(Road(b, distance))
        self._adjacency.setdefault(b, []).append(Road(a, distance))
        self._roads.append((a, b, distance))

    def location_count(self) -> int:
        return len(self._locations)

    def road_count(self) -> int:
        """Number of logical (undirected) roads, parallel roads included."""
        return len(self._roads)

    def roads_from(self, index: int) -> Sequence[Road]:
        """Outgoing roads of a location; empty when it has none."""
        return tuple(self._adjacency.get(index, ()))

    def location_at(self, index: int) -> Location:
        self.check_index(index)
        return self._locations[index]

    def has_location(self, index: int) -> bool:
        """True for an int index of an existing location; bools and floats never match."""
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._locations)
        )

    def locations(self) -> Tuple[Location, ...]:
        return tuple(self._locations)

    def iter_roads(self) -> Iterator[Tuple[int, int, float]]:
        """Yield each undirected road once as ``(a, b, distance)``."""
        yield from self._roads

    def find_location(self, name: str) -> Optional[int]:
        """Return the index of the first location named ``name`` (case-insensitive)."""
        wanted = name.strip().casefold()
        for index, location in enumerate(self._locations):
            if location.name.casefold() == wanted:
                return index
        return None

    def check_index(self, index: int) -> None:
        """Raise InvalidIndexError unless ``index`` names an existing location."""
        if not self.has_location(index):
            valid = isinstance(index, int) and not isinstance(index, bool)
            raise InvalidIndexError(
                f"Location index {index!r} out of range [0, {len(self._locations)})",
                index=index if valid else -1,
                location_count=len(self._locations),
            )


def build_default_campus() -> MapGraph:
    """Build the bundled five-location campus map in code."""
    graph = MapGraph()

    block_a = graph.add_location("Block A", "Admin Block", Position(100, 100))
    block_b = graph.add_location("Block B", "Engineering Block", Position(300, 100))
    block_c = graph.add_location("Block C", "Management Block", Position(500, 200))
    block_d = graph.add_location("Block D", "Law Department", Position(300, 300))
    hostel = graph.add_location("Hostel", "Boys/Girls Hostel", Position(100, 400))

    # distances in km
    graph.add_road(block_a, block_b, 0.5)
    graph.add_road(block_b, block_c, 0.8)
    graph.add_road(block_c, block_d, 1.0)
    graph.add_road(block_d, hostel, 1.2)
    graph.add_road(block_a, hostel, 1.5)
    graph.add_road(block_b, block_d, 0.7)
    graph.add_road(block_c, hostel, 0.9)

    return graph
