from pathlib import Path

import pytest

from campus_nav.adapters.graph import CSVGraphRepository, DijkstraRouteSolver
from campus_nav.adapters.rendering import FoliumMapRenderer
from campus_nav.config import AppConfig, GraphConfig
from campus_nav.container import Container, get_container, reset_container
from campus_nav.ports import GraphRepositoryPort, MapRendererPort, RouteSolverPort
from campus_nav.services import NavigationService

DATA_DIR = Path(__file__).resolve().parents[1] / "campus_nav" / "data"


@pytest.fixture
def container():
    return Container.create_default(AppConfig(graph=GraphConfig(data_dir=DATA_DIR)))


def test_default_bindings(container):
    assert isinstance(container.resolve(GraphRepositoryPort), CSVGraphRepository)
    assert isinstance(container.resolve(RouteSolverPort), DijkstraRouteSolver)
    assert isinstance(container.resolve(MapRendererPort), FoliumMapRenderer)


def test_navigation_service_end_to_end(container):
    navigator = container.resolve(NavigationService)

    route = navigator.find_route(0, 4)

    assert route.path == (0, 4)
    assert route.estimated_minutes == pytest.approx(3.0)
    assert navigator.graph_repository is container.resolve(GraphRepositoryPort)


def test_singletons_are_shared(container):
    assert container.resolve(NavigationService) is container.resolve(NavigationService)
    container.clear_singletons()
    assert container.resolve(RouteSolverPort) is container.resolve(RouteSolverPort)


def test_non_singleton_registration():
    container = Container(config=AppConfig())
    container.register(RouteSolverPort, DijkstraRouteSolver, singleton=False)

    assert container.resolve(RouteSolverPort) is not container.resolve(RouteSolverPort)


def test_unregistered_type_raises():
    container = Container(config=AppConfig())
    assert not container.is_registered(RouteSolverPort)
    with pytest.raises(KeyError):
        container.resolve(RouteSolverPort)


def test_clear_all(container):
    container.clear_all()
    assert not container.is_registered(NavigationService)


def test_global_container_lifecycle():
    reset_container()
    try:
        first = get_container()
        assert get_container() is first
        reset_container()
        assert get_container() is not first
    finally:
        reset_container()
