"""Rendering port - Abstraction for map generation.

This protocol defines the contract for map rendering, allowing
different implementations to be used by the navigation service.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import RouteResult
    from ..graph.store import MapGraph


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py

    All drawing state (graph, route, destination) is passed in on each
    call; renderers keep no window or frame state between calls.
    """

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
        """
        ...
