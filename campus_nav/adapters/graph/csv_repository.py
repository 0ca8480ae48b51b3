"""CSV Graph Repository adapter.

Builds a MapGraph from two CSV files:

- locations: ``location_id,name,description,x,y`` (x/y optional)
- roads: ``from_location_id,to_location_id,distance_km``

Location ids must run densely from 0 in file order, since they become
the graph's indices.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import CampusNavError, GraphError
from ...domain.models import Location, Position
from ...graph.store import MapGraph


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort. The graph is loaded
    once and cached until clear_cache() is called.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    _graph: Optional[MapGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> MapGraph:
        """Load the campus map from CSV files.

        Returns:
            The populated map graph.

        Raises:
            GraphError: If the files are missing or malformed.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "locations_path": str(self.config.locations_path),
                "roads_path": str(self.config.roads_path),
            },
        )

        graph = MapGraph()
        self._load_locations(graph)
        self._load_roads(graph)

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"locations": graph.location_count(), "roads": graph.road_count()},
        )
        return graph

    def _load_locations(self, graph: MapGraph) -> None:
        path = self.config.locations_path
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                for line_no, row in enumerate(reader, start=2):
                    raw_id = (row.get("location_id") or "").strip()
                    if not raw_id:
                        continue

                    location_id = int(raw_id)
                    if location_id != graph.location_count():
                        raise GraphError(
                            f"Line {line_no}: expected location_id "
                            f"{graph.location_count()}, got {location_id}",
                            file_path=str(path),
                        )

                    name = (row.get("name") or "").strip() or raw_id
                    description = (row.get("description") or "").strip()
                    graph.add_location(name, description, self._parse_position(row))
        except (OSError, KeyError, ValueError) as e:
            raise GraphError(
                f"Failed to load locations: {e}",
                file_path=str(path),
                cause=e,
            )

    def _load_roads(self, graph: MapGraph) -> None:
        path = self.config.roads_path
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    from_id = (row.get("from_location_id") or "").strip()
                    to_id = (row.get("to_location_id") or "").strip()
                    distance_str = (row.get("distance_km") or "").strip()

                    if not from_id or not to_id or not distance_str:
                        continue

                    graph.add_road(int(from_id), int(to_id), float(distance_str))
        except (OSError, KeyError, ValueError, CampusNavError) as e:
            raise GraphError(
                f"Failed to load roads: {e}",
                file_path=str(path),
                cause=e,
            )

    @staticmethod
    def _parse_position(row: dict) -> Optional[Position]:
        x_str = (row.get("x") or "").strip()
        y_str = (row.get("y") or "").strip()
        if not x_str or not y_str:
            return None
        return Position(float(x_str), float(y_str))

    def get_location(self, index: int) -> Optional[Location]:
        """Get location details by index.

        Args:
            index: The location index to look up.

        Returns:
            The location, or None if the index is unknown.
        """
        graph = self.load()
        if not graph.has_location(index):
            return None
        return graph.location_at(index)

    def list_locations(self) -> Sequence[Location]:
        """List all locations in index order."""
        return list(self.load().locations())

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
