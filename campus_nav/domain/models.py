"""Immutable domain models for the campus navigator.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of the map: locations,
the roads between them, and the result of a route query.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class Position:
    """Planar drawing coordinates of a location (screen units, y down)."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Location:
    """A named point of interest on the campus.

    Attributes:
        name: Display name (e.g., 'Block A')
        description: Free-text description, may be empty
        position: Optional drawing coordinates, only used for rendering
    """

    name: str
    description: str = ""
    position: Optional[Position] = None


@dataclass(frozen=True, slots=True)
class Road:
    """One directed adjacency record of an undirected road.

    Attributes:
        destination: Index of the location the road leads to
        distance: Non-negative length of the road in kilometers
    """

    destination: int
    distance: float


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query between two locations.

    Attributes:
        path: Ordered tuple of location indices from start to end
        total_distance_km: Sum of traversed road distances (inf if no path)
        locations: Resolved location details for each stop
        estimated_minutes: Estimated walking time for the route
    """

    path: tuple[int, ...]
    total_distance_km: float
    locations: tuple[Location, ...] = field(default_factory=tuple)
    estimated_minutes: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.path)

    @property
    def is_reachable(self) -> bool:
        return not self.is_empty and math.isfinite(self.total_distance_km)
