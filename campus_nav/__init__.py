"""Top-level package for the campus navigator.

The package builds a small undirected campus map, finds shortest
walking routes between its locations with Dijkstra's algorithm, and
reports them with an estimated travel time and an optional HTML map.
"""

from .graph import MapGraph, build_default_campus, shortest_path

__all__ = ["MapGraph", "build_default_campus", "shortest_path"]
