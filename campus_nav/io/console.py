"""Console interaction for choosing route endpoints.

Input and output callables are injectable so the prompts can be driven
from tests or other front-ends.
"""

from __future__ import annotations

from typing import Callable

from ..domain.errors import InvalidIndexError
from ..graph.store import MapGraph


def format_location_menu(graph: MapGraph) -> str:
    """List locations as ``"<index>. <name> - <description>"`` lines."""
    lines = ["Available Locations:"]
    for index, location in enumerate(graph.locations()):
        lines.append(f"{index}. {location.name} - {location.description}")
    return "\n".join(lines)


def parse_location_choice(raw: str, graph: MapGraph) -> int:
    """Turn user input (an index or a location name) into a location index.

    Raises:
        ValueError: If the input is empty or names no location.
        InvalidIndexError: If the input is a number outside the valid range.
    """
    text = raw.strip()
    if not text:
        raise ValueError("No location given")

    if text.lstrip("-").isdigit():
        index = int(text)
        if not graph.has_location(index):
            raise InvalidIndexError(
                f"Location number must be between 0 and {graph.location_count() - 1}",
                index=index,
                location_count=graph.location_count(),
            )
        return index

    index = graph.find_location(text)
    if index is None:
        raise ValueError(f"Unknown location: {text!r}")
    return index


def prompt_location(
    prompt: str,
    graph: MapGraph,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> int:
    """Ask until the user enters a valid location.

    Raises:
        EOFError: If the input stream ends before a valid answer.
    """
    while True:
        raw = input_fn(prompt)
        try:
            return parse_location_choice(raw, graph)
        except (ValueError, InvalidIndexError) as e:
            output_fn(f"Invalid choice: {e}")
