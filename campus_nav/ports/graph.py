"""Graph ports - Abstractions for map loading and routing.

These protocols define the contracts for graph operations, including
loading the campus map and computing shortest paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Location, RouteResult
    from ..graph.store import MapGraph


class GraphRepositoryPort(Protocol):
    """Port for loading map data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the
    campus map from persistent storage.
    """

    def load(self) -> MapGraph:
        """Load the campus map.

        Returns:
            The populated map graph.
        """
        ...

    def get_location(self, index: int) -> Optional[Location]:
        """Get location details by index.

        Args:
            index: The location index to look up.

        Returns:
            The location, or None if not found.
        """
        ...

    def list_locations(self) -> Sequence[Location]:
        """List all locations in index order."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py

    The solver computes optimal paths through the campus map.
    """

    def solve(
        self,
        graph: MapGraph,
        start: int,
        end: int,
    ) -> RouteResult:
        """Find the shortest path between two locations.

        Args:
            graph: The campus map.
            start: Start location index.
            end: End location index.

        Returns:
            RouteResult with path, distance, and location details.
        """
        ...
