"""Graph-related utilities for representing the campus map.

This subpackage contains the in-memory map store and the Dijkstra
path-finding engine that runs on top of it.
"""

from .dijkstra import shortest_path
from .store import MapGraph, build_default_campus

__all__ = ["MapGraph", "build_default_campus", "shortest_path"]
