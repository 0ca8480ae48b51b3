"""Folium map renderer adapter.

Draws the campus map with a highlighted route into an interactive HTML
file. Location positions are planar screen coordinates (y pointing
down), so the map uses Leaflet's ``Simple`` CRS without tiles and maps
``(x, y)`` to ``[-y, x]``.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from ...config import RenderingConfig, RoutingConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import Position, RouteResult
from ...graph.store import MapGraph


def _to_map_coords(position: Position) -> Tuple[float, float]:
    return (-position.y, position.x)


def format_summary(route: RouteResult, minutes_per_km: Optional[float] = None) -> str:
    """One-line distance and time summary shown under the map.

    The time comes from the route's own estimate, else from
    ``minutes_per_km``; with neither, it is left out.
    """
    if route.is_empty:
        return "No path selected"

    summary = f"Shortest Path: {route.total_distance_km:.2f} km"
    minutes = route.estimated_minutes
    if minutes is None and minutes_per_km is not None:
        minutes = route.total_distance_km * minutes_per_km
    if minutes is not None:
        summary += f" | Estimated Time: {minutes:.2f} mins"
    return summary


@dataclass
class FoliumMapRenderer:
    """Folium-based interactive map renderer.

    This adapter implements MapRendererPort.

    Attributes:
        config: Colors and line weights
        routing: Travel time factor for routes without an estimate
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    routing: RoutingConfig = field(default_factory=lambda: get_config().routing)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        graph: MapGraph,
        route: RouteResult,
        output_path: Path,
    ) -> Path:
        """Render the map with a highlighted route and save to file.

        Args:
            graph: The campus map to draw.
            route: The route to highlight (may be empty).
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.

        Raises:
            RenderingError: If a location has no position or rendering fails.
        """
        locations = graph.locations()
        if not locations:
            raise RenderingError(
                "Cannot render an empty map",
                output_path=str(output_path),
                renderer_type="folium",
            )

        missing = [loc.name for loc in locations if loc.position is None]
        if missing:
            raise RenderingError(
                f"Locations without a position: {missing!r}",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering campus map",
            extra={
                "locations": len(locations),
                "stops": route.num_stops,
                "output_path": str(output_path),
            },
        )

        try:
            import folium

            coords: List[Tuple[float, float]] = [
                _to_map_coords(loc.position) for loc in locations  # type: ignore[arg-type]
            ]
            center_lat = sum(c[0] for c in coords) / len(coords)
            center_lon = sum(c[1] for c in coords) / len(coords)

            m = folium.Map(
                location=[center_lat, center_lon],
                zoom_start=0,
                crs="Simple",
                tiles=None,
            )

            # All roads, each drawn once
            for a, b, distance in graph.iter_roads():
                folium.PolyLine(
                    [coords[a], coords[b]],
                    color=self.config.road_color,
                    weight=2,
                    tooltip=f"{distance:.2f} km",
                ).add_to(m)

            if route.num_stops > 1:
                folium.PolyLine(
                    [coords[index] for index in route.path],
                    color=self.config.path_color,
                    weight=self.config.path_weight,
                    opacity=0.9,
                ).add_to(m)

            for index, location in enumerate(locations):
                folium.CircleMarker(
                    location=coords[index],
                    radius=12,
                    color=self.config.node_color,
                    fill=True,
                    fill_color=self.config.node_color,
                    fill_opacity=0.9,
                    tooltip=location.name,
                    popup=f"{index}. {location.name} - {location.description}",
                ).add_to(m)

            summary = html.escape(format_summary(route, self.routing.minutes_per_km))
            m.get_root().html.add_child(
                folium.Element(
                    '<div style="position: fixed; bottom: 12px; left: 12px; '
                    "z-index: 1000; background: white; padding: 4px 8px; "
                    f'font: 14px sans-serif;">{summary}</div>'
                )
            )

            if len(coords) >= 2:
                m.fit_bounds(
                    [
                        [min(c[0] for c in coords), min(c[1] for c in coords)],
                        [max(c[0] for c in coords), max(c[1] for c in coords)],
                    ]
                )

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))

            self._logger.info(
                "Map rendered successfully",
                extra={"output_path": str(output_path)},
            )

            return output_path

        except ImportError as e:
            raise RenderingError(
                "Folium not installed",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
