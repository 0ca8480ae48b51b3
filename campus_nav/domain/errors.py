"""Typed domain errors for the campus navigator.

Structural errors (bad indices, bad weights) are raised at the point of
misuse. An unreachable destination is a valid query outcome and is only
turned into ``NoPathFoundError`` by callers that ask for it.

All errors inherit from CampusNavError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CampusNavError(Exception):
    """Base error for the campus navigator domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidIndexError(CampusNavError):
    """A location index outside ``[0, location_count)``.

    Attributes:
        index: The offending index
        location_count: Number of locations in the graph at the time
    """

    index: int = -1
    location_count: int = 0


@dataclass
class InvalidWeightError(CampusNavError):
    """A road distance that is negative or not a finite number.

    Attributes:
        distance: The rejected distance
    """

    distance: float = 0.0


@dataclass
class NoPathFoundError(CampusNavError):
    """No sequence of roads connects the requested locations.

    Attributes:
        start: Start location index
        end: End location index
    """

    start: int = -1
    end: int = -1


@dataclass
class GraphError(CampusNavError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(CampusNavError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""


@dataclass
class RenderingError(CampusNavError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
