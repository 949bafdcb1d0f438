"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations, including
loading transit networks and computing shortest paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import RouteNode, RouteResult, Vertex
    from ..graph import Graph, ShortestPathTree


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the
    transit network graph from persistent storage.
    """

    def load(self) -> Graph:
        """Load the transit graph.

        Returns:
            The graph with every route node and lane.
        """
        ...

    def get_node(self, node_id: int) -> Optional[RouteNode]:
        """Get route node details by id.

        Args:
            node_id: The node identifier to look up.

        Returns:
            The route node, or None if not found.
        """
        ...

    def list_nodes(self) -> Sequence[RouteNode]:
        """List all route nodes of the network."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: Graph, departure: Vertex, arrival: Vertex) -> RouteResult:
        """Find the shortest path between two vertices.

        Args:
            graph: The transit network graph.
            departure: Departure vertex.
            arrival: Arrival vertex.

        Returns:
            RouteResult with path and total cost.
        """
        ...

    def tree(self, graph: Graph, departure: Vertex) -> ShortestPathTree:
        """Compute shortest paths from a vertex to every other vertex."""
        ...
