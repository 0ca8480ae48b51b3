"""Navigation service - Main orchestrator.

Loads the campus map, validates the requested endpoints, solves the
route, estimates the travel time and optionally renders the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Sequence

from ..config import RoutingConfig, get_config
from ..domain.errors import NoPathFoundError, RenderingError
from ..domain.models import Location, RouteResult
from ..graph.store import MapGraph
from ..ports.graph import GraphRepositoryPort, RouteSolverPort
from ..ports.rendering import MapRendererPort


@dataclass
class NavigationService:
    """Main service for answering route queries on the campus map.

    Attributes:
        graph_repository: Loads the campus map
        route_solver: Computes shortest paths
        map_renderer: Optional map rendering
        routing: Travel time conversion settings
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    map_renderer: Optional[MapRendererPort] = None
    routing: RoutingConfig = field(default_factory=lambda: get_config().routing)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> MapGraph:
        return self.graph_repository.load()

    def list_locations(self) -> Sequence[Location]:
        return self.graph_repository.list_locations()

    def estimate_minutes(self, distance_km: float) -> float:
        """Convert a distance into an estimated walking time."""
        return distance_km * self.routing.minutes_per_km

    def find_route(self, start: int, end: int, *, strict: bool = False) -> RouteResult:
        """Compute the shortest route between two locations.

        Args:
            start: Start location index.
            end: End location index.
            strict: Raise NoPathFoundError instead of returning an empty route.

        Returns:
            RouteResult with estimated_minutes filled in. Empty if the
            locations are not connected and ``strict`` is False.

        Raises:
            InvalidIndexError: If start or end is not a known location.
            NoPathFoundError: If ``strict`` and no path exists.
        """
        graph = self.graph
        graph.check_index(start)
        graph.check_index(end)

        route = self.route_solver.solve(graph, start, end)

        if route.is_empty:
            if strict:
                raise NoPathFoundError(
                    f"No path from {graph.location_at(start).name} "
                    f"to {graph.location_at(end).name}",
                    start=start,
                    end=end,
                )
            return route

        route = replace(
            route, estimated_minutes=self.estimate_minutes(route.total_distance_km)
        )
        self._logger.info(
            "Route computed",
            extra={
                "stops": route.num_stops,
                "distance_km": route.total_distance_km,
                "minutes": route.estimated_minutes,
            },
        )
        return route

    def render_route(self, route: RouteResult, output_path: Path) -> Path:
        """Render the map with ``route`` highlighted.

        Raises:
            RenderingError: If no renderer is configured or rendering fails.
        """
        if self.map_renderer is None:
            raise RenderingError(
                "No map renderer configured",
                output_path=str(output_path),
            )
        path = self.map_renderer.render(self.graph, route, output_path)
        self._logger.info("Map generated", extra={"path": str(path)})
        return path

    def format_result(
        self,
        route: RouteResult,
        start: Optional[int] = None,
        end: Optional[int] = None,
        map_path: Optional[Path] = None,
    ) -> str:
        """Format a route as a human-readable string.

        Args:
            route: The computed route.
            start: Start index, used to name the endpoints of an empty route.
            end: End index, used to name the endpoints of an empty route.
            map_path: Optional path to a generated map.

        Returns:
            Formatted result string.
        """
        unit = self.routing.distance_unit

        if route.is_empty:
            graph = self.graph
            start_name = graph.location_at(start).name if start is not None else "?"
            end_name = graph.location_at(end).name if end is not None else "?"
            return f"No path found between {start_name} and {end_name}."

        names = [loc.name for loc in route.locations] or [str(i) for i in route.path]
        minutes = route.estimated_minutes
        if minutes is None:
            minutes = self.estimate_minutes(route.total_distance_km)

        result = (
            f"Shortest path: {' -> '.join(names)}\n"
            f"Total distance: {route.total_distance_km:.2f} {unit} | "
            f"Estimated time: {minutes:.2f} mins"
        )

        if map_path:
            result += f"\nMap saved to: {map_path}"

        return result
