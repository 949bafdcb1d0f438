"""Wiring of the route planner.

The container builds the default graph repository and solver from the
application config and hands them to a single RoutePlannerService.
Either collaborator can be passed in explicitly, which is how tests
plug in an in-memory network.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from .adapters.graph import CSVGraphRepository, DijkstraRouteSolver
from .config import AppConfig, get_config
from .ports.graph import GraphRepositoryPort, RouteSolverPort
from .services import RoutePlannerService


@dataclass
class Container:
    """Holds the collaborators of one route planner.

    Attributes:
        config: Application configuration
        graph_repository: Source of the transit graph, CSV files by default
        route_solver: Shortest-path solver, Dijkstra by default
    """

    config: AppConfig = field(default_factory=get_config)
    graph_repository: Optional[GraphRepositoryPort] = None
    route_solver: Optional[RouteSolverPort] = None

    _planner: Optional[RoutePlannerService] = field(
        default=None, init=False, repr=False
    )
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        if self.graph_repository is None:
            self.graph_repository = CSVGraphRepository(self.config.graph)
        if self.route_solver is None:
            self.route_solver = DijkstraRouteSolver()

    def route_planner(self) -> RoutePlannerService:
        """Return the planner, building it on first use."""
        with self._lock:
            if self._planner is None:
                assert self.graph_repository is not None
                assert self.route_solver is not None
                self._planner = RoutePlannerService(
                    graph_repository=self.graph_repository,
                    route_solver=self.route_solver,
                )
            return self._planner


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container."""
    global _default_container
    with _container_lock:
        if _default_container is None:
            _default_container = Container()
        return _default_container


def reset_container() -> None:
    """Drop the default container so the next call rebuilds it from config."""
    global _default_container
    with _container_lock:
        _default_container = None
