"""Route planner service - Main orchestrator.

Loads the transit graph through the repository port, resolves stop
identifiers to vertices and delegates the computation to the solver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import (
    GraphError,
    TransitRouterError,
    UnknownSourceError,
    UnreachableTargetError,
)
from ..domain.models import RouteResult, Vertex
from ..graph import Graph
from ..ports.graph import GraphRepositoryPort, RouteSolverPort


@dataclass
class RoutePlannerService:
    """Main service for planning routes between stops.

    Attributes:
        graph_repository: Loads the transit graph
        route_solver: Computes shortest paths
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan(self, departure_id: str, arrival_id: str) -> RouteResult:
        """Plan the cheapest route between two stops.

        Args:
            departure_id: Vertex identifier of the departure stop.
            arrival_id: Vertex identifier of the arrival stop.

        Returns:
            RouteResult with the computed route.

        Raises:
            UnknownSourceError: If the departure stop is not in the graph.
            UnreachableTargetError: If the arrival stop is unknown or unreachable.
            GraphError: If the graph cannot be loaded.
        """
        self._logger.info(
            "Planning route",
            extra={"departure": departure_id, "arrival": arrival_id},
        )

        graph = self.graph_repository.load()

        departure = _find_vertex(graph, departure_id)
        if departure is None:
            raise UnknownSourceError(
                f"Departure stop not in graph: {departure_id}",
                vertex_id=departure_id,
            )

        arrival = _find_vertex(graph, arrival_id)
        if arrival is None:
            raise UnreachableTargetError(
                f"Arrival stop not in graph: {arrival_id}",
                source_id=departure_id,
                target_id=arrival_id,
            )

        route = self.route_solver.solve(graph, departure, arrival)
        self._logger.info(
            "Route planned",
            extra={"stops": route.num_stops, "cost": route.total_cost},
        )
        return route

    def plan_safe(
        self, departure_id: str, arrival_id: str
    ) -> tuple[Optional[RouteResult], Optional[str]]:
        """Plan a route, returning an error message instead of raising.

        Returns:
            Tuple of (RouteResult or None, error message or None).
        """
        try:
            return self.plan(departure_id, arrival_id), None
        except UnknownSourceError as e:
            return None, f"Unknown departure stop: {e.vertex_id}"
        except UnreachableTargetError as e:
            return None, f"No path found between {e.source_id} and {e.target_id}"
        except GraphError as e:
            return None, f"Graph error: {e}"
        except TransitRouterError as e:
            return None, f"Error: {e}"


def _find_vertex(graph: Graph, vertex_id: str) -> Optional[Vertex]:
    for vertex in graph.vertices:
        if vertex.id == vertex_id:
            return vertex
    return None
