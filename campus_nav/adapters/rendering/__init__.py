"""Rendering adapters - Implementations of MapRendererPort.

Available implementations:
- FoliumMapRenderer: Folium-based interactive map rendering
"""

from .folium_adapter import FoliumMapRenderer, format_summary

__all__ = ["FoliumMapRenderer", "format_summary"]
