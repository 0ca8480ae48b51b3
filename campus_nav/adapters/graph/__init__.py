"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads the campus map from CSV files
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .csv_repository import CSVGraphRepository
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["CSVGraphRepository", "DijkstraRouteSolver"]
