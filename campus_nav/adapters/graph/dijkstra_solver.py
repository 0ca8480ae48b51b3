"""Dijkstra Route Solver adapter.

This adapter wraps the engine in graph/dijkstra.py and adds:
- Domain model output (RouteResult)
- Location resolution
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import RouteResult
from ...graph.dijkstra import shortest_path
from ...graph.store import MapGraph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. An unreachable destination
    yields an empty RouteResult rather than an exception.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: MapGraph, start: int, end: int) -> RouteResult:
        """Find the shortest path between two locations.

        Args:
            graph: The campus map.
            start: Start location index.
            end: End location index.

        Returns:
            RouteResult with path, distance, and location details.
            Empty (with infinite distance) if the locations are not connected.

        Raises:
            InvalidIndexError: If start or end is not a location of the graph.
        """
        self._logger.debug(
            "Solving route",
            extra={"start": start, "end": end},
        )

        path, distance = shortest_path(graph, start, end)

        if not path:
            self._logger.warning(
                "No route found",
                extra={"start": start, "end": end},
            )
            return RouteResult(path=(), total_distance_km=float("inf"))

        self._logger.info(
            "Route found",
            extra={
                "start": start,
                "end": end,
                "stops": len(path),
                "distance_km": distance,
            },
        )

        return RouteResult(
            path=tuple(path),
            total_distance_km=distance,
            locations=tuple(graph.location_at(index) for index in path),
        )
