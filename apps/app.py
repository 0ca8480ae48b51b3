# -*- coding: utf-8 -*-
import html
import tempfile
from pathlib import Path
from typing import List, Tuple

import gradio as gr

from campus_nav.config import configure_logging, get_config
from campus_nav.container import get_container
from campus_nav.domain.errors import CampusNavError
from campus_nav.services import NavigationService

configure_logging()

NAVIGATOR: NavigationService = get_container().resolve(NavigationService)
GRAPH = NAVIGATOR.graph

# "<index>. <name>" labels, index recovered on selection
LOCATION_CHOICES: List[str] = [
    f"{index}. {location.name}" for index, location in enumerate(GRAPH.locations())
]


def _map_iframe_from_html(document_html: str, *, height_px: int = 520) -> str:
    escaped = html.escape(document_html, quote=True)
    return (
        f'<iframe srcdoc="{escaped}" '
        f'style="width: 100%; height: {height_px}px; border: 0;" '
        f'loading="lazy"></iframe>'
    )


def _index_from_choice(choice: str) -> int:
    return int(choice.split(".", 1)[0])


def find_route(start_choice: str, end_choice: str) -> Tuple[str, str]:
    if not start_choice or not end_choice:
        return "Please choose a start and a destination.", "<p></p>"

    start = _index_from_choice(start_choice)
    end = _index_from_choice(end_choice)

    try:
        route = NAVIGATOR.find_route(start, end)
        message = NAVIGATOR.format_result(route, start, end)

        map_path = Path(tempfile.gettempdir()) / get_config().rendering.output_file
        NAVIGATOR.render_route(route, map_path)
        map_html = _map_iframe_from_html(map_path.read_text(encoding="utf-8"))
    except CampusNavError as e:
        return f"Error: {e}", "<p></p>"

    return message, map_html


with gr.Blocks(title="Campus Navigator") as app:
    gr.Markdown("# 🗺️ Campus Navigator")

    with gr.Row():
        start_dd = gr.Dropdown(LOCATION_CHOICES, label="Start location")
        end_dd = gr.Dropdown(LOCATION_CHOICES, label="Destination")

    btn = gr.Button("🚶 Find shortest path")
    output = gr.Textbox(label="Route", lines=3)
    map_view = gr.HTML(value="<p></p>")

    btn.click(find_route, [start_dd, end_dd], [output, map_view])


if __name__ == "__main__":
    app.launch()
