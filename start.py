"""Console launcher for the campus navigator.

Lists the campus locations, asks for a start and a destination, prints
the shortest route with its estimated walking time and writes an HTML
map of the result.
"""

from __future__ import annotations

import sys

from campus_nav.config import configure_logging, get_config
from campus_nav.container import get_container
from campus_nav.domain.errors import CampusNavError
from campus_nav.io.console import format_location_menu, prompt_location
from campus_nav.services import NavigationService


def main() -> int:
    config = get_config()
    configure_logging(config)

    navigator: NavigationService = get_container().resolve(NavigationService)

    try:
        graph = navigator.graph
        print(format_location_menu(graph))

        start = prompt_location("Enter start location number: ", graph)
        end = prompt_location("Enter destination location number: ", graph)

        route = navigator.find_route(start, end)

        map_path = None
        if not route.is_empty:
            map_path = navigator.render_route(route, config.map_output_path)

        print(navigator.format_result(route, start, end, map_path))
    except EOFError:
        print("\nNo input, exiting.")
        return 1
    except CampusNavError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
