"""Dijkstra Route Solver adapter.

This adapter wraps the ShortestPath engine and adds:
- Domain model output (RouteResult)
- A non-raising variant returning the explicit "no route" result
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import UnknownSourceError, UnreachableTargetError
from ...domain.models import RouteResult, Vertex
from ...graph import Graph, ShortestPath, ShortestPathTree


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def tree(self, graph: Graph, departure: Vertex) -> ShortestPathTree:
        """Compute shortest paths from ``departure`` to every vertex.

        Raises:
            UnknownSourceError: If departure is not a vertex of the graph.
        """
        return ShortestPath(graph).execute(departure)

    def solve(self, graph: Graph, departure: Vertex, arrival: Vertex) -> RouteResult:
        """Find the shortest path between two vertices.

        Args:
            graph: The transit network graph.
            departure: Departure vertex.
            arrival: Arrival vertex.

        Returns:
            RouteResult with path and total cost.

        Raises:
            UnknownSourceError: If departure is not in the graph.
            UnreachableTargetError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure.id, "arrival": arrival.id},
        )

        tree = self.tree(graph, departure)

        if not tree.is_reachable(arrival):
            self._logger.warning(
                "No route found",
                extra={"departure": departure.id, "arrival": arrival.id},
            )
            raise UnreachableTargetError(
                f"No path from {departure.id} to {arrival.id}",
                source_id=departure.id,
                target_id=arrival.id,
            )

        path = tree.path_to(arrival)
        cost = tree.distance_to(arrival)

        self._logger.info(
            "Route found",
            extra={
                "departure": departure.id,
                "arrival": arrival.id,
                "stops": len(path),
                "cost": cost,
            },
        )

        return RouteResult(path=path, total_cost=cost)

    def solve_safe(
        self, graph: Graph, departure: Vertex, arrival: Vertex
    ) -> RouteResult:
        """Find the shortest path, returning the "no route" result on failure.

        Like solve(), but an unknown departure or an unreachable arrival
        give ``RouteResult.no_route()`` instead of raising.
        """
        try:
            return self.solve(graph, departure, arrival)
        except (UnknownSourceError, UnreachableTargetError) as e:
            self._logger.debug("Returning empty route", extra={"reason": str(e)})
            return RouteResult.no_route()
