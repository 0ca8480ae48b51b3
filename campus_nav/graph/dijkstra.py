"""Shortest-path computation using Dijkstra's algorithm.

The engine only reads the graph. All per-query state (tentative
distances, predecessors, frontier) is local to the call, so a graph
that is no longer being mutated can be queried from several threads.
"""

import heapq
from typing import List, Optional, Tuple

from .store import MapGraph


def shortest_path(graph: MapGraph, start: int, end: int) -> Tuple[List[int], float]:
    """Compute the shortest path between two locations using Dijkstra.

    Precondition: every road distance is non-negative. ``MapGraph.add_road``
    enforces it, and the early exit below depends on it: once ``end`` is
    popped from the frontier its distance can no longer improve.

    Parameters
    ----------
    graph:
        Campus map as built by ``MapGraph`` or the CSV repository.
    start:
        Index of the departure location.
    end:
        Index of the arrival location.

    Returns
    -------
    list[int], float
        The sequence of location indices from ``start`` to ``end``
        (inclusive) and the total distance. If ``start == end`` the result
        is ``([start], 0.0)``. If no path exists, returns ``([], inf)``.

    Raises
    ------
    InvalidIndexError
        If ``start`` or ``end`` is not an int in ``[0, graph.location_count())``.
        An empty graph therefore rejects every query.
    """
    graph.check_index(start)
    graph.check_index(end)
    count = graph.location_count()

    if start == end:
        return [start], 0.0

    distances: List[float] = [float("inf")] * count
    previous: List[Optional[int]] = [None] * count
    distances[start] = 0.0

    heap: List[Tuple[float, int]] = [(0.0, start)]

    while heap:
        current_distance, u = heapq.heappop(heap)

        # stale entry, u was reached more cheaply after this was pushed
        if current_distance > distances[u]:
            continue

        if u == end:
            break

        for road in graph.roads_from(u):
            v = road.destination
            new_distance = current_distance + road.distance
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    if previous[end] is None:
        return [], float("inf")

    path: List[int] = [end]
    current = end
    while current != start:
        current = previous[current]  # type: ignore[assignment]
        path.append(current)

    path.reverse()
    return path, distances[end]
