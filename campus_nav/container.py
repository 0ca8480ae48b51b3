"""Wiring of the campus navigator.

Binds the graph, routing and rendering ports to their CSV, Dijkstra and
folium adapters, and builds the NavigationService on top of them. The
console launcher and the Gradio app both pull the service from
``get_container()``; tests build their own ``Container`` around an
``AppConfig`` pointing at fixture data.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Set

from .config import AppConfig, get_config

Factory = Callable[[], Any]


@dataclass
class Container:
    """Registry of factories keyed by port type (or service class).

    Factories registered as shared build their object once, on the first
    ``resolve``; the others build a new one each time. A navigator built
    from the default bindings shares the repository's cached graph with
    anything else resolved from the same container.
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type, Factory] = field(default_factory=dict, repr=False)
    _shared: Set[type] = field(default_factory=set, repr=False)
    _instances: Dict[type, Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, key: type, factory: Factory, singleton: bool = True) -> None:
        """Bind ``key`` to ``factory``, replacing any earlier binding's sharing mode."""
        with self._lock:
            self._factories[key] = factory
            if singleton:
                self._shared.add(key)
            else:
                self._shared.discard(key)
                self._instances.pop(key, None)

    def resolve(self, key: type) -> Any:
        """Return the object bound to ``key``.

        Raises:
            KeyError: If nothing is registered for ``key``.
        """
        with self._lock:
            factory = self._factories.get(key)
            if factory is None:
                raise KeyError(f"Type not registered: {key}")
            if key not in self._shared:
                return factory()
            if key not in self._instances:
                self._instances[key] = factory()
            return self._instances[key]

    def is_registered(self, key: type) -> bool:
        return key in self._factories

    def clear_singletons(self) -> None:
        """Drop the built shared objects; the next resolve reloads the campus."""
        with self._lock:
            self._instances.clear()

    def clear_all(self) -> None:
        with self._lock:
            self._factories.clear()
            self._shared.clear()
            self._instances.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Container with the CSV repository, Dijkstra solver and folium renderer."""
        from .adapters.graph import CSVGraphRepository, DijkstraRouteSolver
        from .adapters.rendering import FoliumMapRenderer
        from .ports.graph import GraphRepositoryPort, RouteSolverPort
        from .ports.rendering import MapRendererPort
        from .services import NavigationService

        config = config or get_config()
        container = cls(config=config)

        container.register(GraphRepositoryPort, lambda: CSVGraphRepository(config.graph))
        container.register(RouteSolverPort, DijkstraRouteSolver)
        container.register(
            MapRendererPort,
            lambda: FoliumMapRenderer(config.rendering, config.routing),
        )

        def navigator() -> NavigationService:
            return NavigationService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
                map_renderer=container.resolve(MapRendererPort),
                routing=config.routing,
            )

        container.register(NavigationService, navigator)
        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Process-wide container built from ``get_config()`` on first use."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
