"""Tests for the Dijkstra route solver adapter."""

import math

import pytest

from campus_nav.adapters.graph import DijkstraRouteSolver
from campus_nav.domain.errors import InvalidIndexError
from campus_nav.graph.store import MapGraph, build_default_campus


@pytest.fixture
def solver():
    return DijkstraRouteSolver()


def test_solve_resolves_locations(solver):
    graph = build_default_campus()
    route = solver.solve(graph, 0, 2)

    assert route.path == (0, 1, 2)
    assert route.total_distance_km == pytest.approx(1.3)
    assert [loc.name for loc in route.locations] == ["Block A", "Block B", "Block C"]
    assert route.num_stops == 3
    assert route.is_reachable
    assert route.estimated_minutes is None


def test_solve_unreachable_returns_empty_route(solver):
    graph = MapGraph()
    graph.add_location("A")
    graph.add_location("B")

    route = solver.solve(graph, 0, 1)

    assert route.is_empty
    assert not route.is_reachable
    assert math.isinf(route.total_distance_km)
    assert route.locations == ()


def test_solve_same_location(solver):
    route = solver.solve(build_default_campus(), 3, 3)
    assert route.path == (3,)
    assert route.total_distance_km == 0.0


def test_solve_invalid_index_propagates(solver):
    with pytest.raises(InvalidIndexError):
        solver.solve(build_default_campus(), 0, 10)
