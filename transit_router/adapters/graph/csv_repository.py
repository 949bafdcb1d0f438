"""CSV Graph Repository adapter.

Loads the transit network from two CSV files:

- ``nodes.csv`` with columns ``node_id,lat,lon`` and an optional ``name``
- ``lanes.csv`` with columns ``lane_id,from_node_id,to_node_id,duration``

Route nodes go through a NodeRegistry so duplicate identifiers in the
file are reported, and every lane must reference known nodes.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import Edge, RouteNode, Vertex
from ...graph import Graph
from ...registry import NodeRegistry


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)
    _registry: Optional[NodeRegistry] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the transit graph from CSV files.

        Returns:
            The graph with one vertex per route node and one edge per lane.

        Raises:
            GraphError: If a file cannot be read or holds invalid data.
            DuplicateNodeError: If a node identifier appears twice.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "nodes_path": str(self.config.nodes_path),
                "lanes_path": str(self.config.lanes_path),
            },
        )

        registry = self.registry()
        vertices = registry.vertices()
        edges = self._load_lanes({vertex.id: vertex for vertex in vertices})

        graph = Graph(vertices, edges)
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(vertices), "lanes": len(edges)},
        )
        return graph

    def registry(self) -> NodeRegistry:
        """Return the registry of route nodes read from ``nodes.csv``.

        Raises:
            GraphError: If the file cannot be read or a row is invalid.
            DuplicateNodeError: If a node identifier appears twice.
        """
        if self._registry is not None:
            return self._registry

        registry = NodeRegistry()
        path = self.config.nodes_path
        try:
            with path.open(encoding="utf-8", newline="") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    node_id = (row.get("node_id") or "").strip()
                    if not node_id:
                        continue

                    registry.create(
                        node_id=int(node_id),
                        latitude=float(row["lat"]),
                        longitude=float(row["lon"]),
                        name=(row.get("name") or "").strip() or None,
                    )
        except (OSError, KeyError, TypeError, ValueError) as e:
            raise GraphError(
                f"Failed to load route nodes: {e}",
                file_path=str(path),
                cause=e,
            )

        self._registry = registry
        return registry

    def _load_lanes(self, vertices: Dict[str, Vertex]) -> List[Edge]:
        edges: List[Edge] = []
        path = self.config.lanes_path
        try:
            with path.open(encoding="utf-8", newline="") as f:
                reader = csv.DictReader(f)
                for line, row in enumerate(reader, start=2):
                    from_id = (row.get("from_node_id") or "").strip()
                    to_id = (row.get("to_node_id") or "").strip()
                    duration = (row.get("duration") or "").strip()

                    if not from_id or not to_id or not duration:
                        continue

                    # Vertex ids are the canonical form of the integer node ids.
                    from_id, to_id = str(int(from_id)), str(int(to_id))
                    missing = [v for v in (from_id, to_id) if v not in vertices]
                    if missing:
                        raise GraphError(
                            f"Lane on line {line} references unknown node {missing[0]}",
                            file_path=str(path),
                        )

                    lane_id = (row.get("lane_id") or "").strip()
                    edges.append(
                        Edge(
                            id=lane_id or f"Lane_{len(edges)}",
                            source=vertices[from_id],
                            destination=vertices[to_id],
                            weight=float(duration),
                        )
                    )
        except (OSError, ValueError) as e:
            raise GraphError(
                f"Failed to load lanes: {e}",
                file_path=str(path),
                cause=e,
            )

        return edges

    def get_node(self, node_id: int) -> Optional[RouteNode]:
        """Get route node details by id.

        Returns:
            The route node, or None if not found.
        """
        return self.registry().get(node_id)

    def list_nodes(self) -> Sequence[RouteNode]:
        return self.registry().nodes()

    def clear_cache(self) -> None:
        """Clear cached graph and node data."""
        self._graph = None
        self._registry = None
        self._logger.debug("Graph cache cleared")
