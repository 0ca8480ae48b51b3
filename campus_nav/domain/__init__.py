"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CampusNavError,
    ConfigurationError,
    GraphError,
    InvalidIndexError,
    InvalidWeightError,
    NoPathFoundError,
    RenderingError,
)
from .models import Location, Position, Road, RouteResult

__all__ = [
    # Models
    "Location",
    "Position",
    "Road",
    "RouteResult",
    # Errors
    "CampusNavError",
    "InvalidIndexError",
    "InvalidWeightError",
    "NoPathFoundError",
    "GraphError",
    "ConfigurationError",
    "RenderingError",
]
