"""Input/output helpers for the campus navigator.

This subpackage holds the console prompts used to pick the start and
destination of a route.
"""

from .console import format_location_menu, parse_location_choice, prompt_location

__all__ = ["format_location_menu", "parse_location_choice", "prompt_location"]
