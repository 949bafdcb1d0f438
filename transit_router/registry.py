"""Route node registry.

The registry owns the stops of one transit network, keyed by their
identifier. Each registry instance has its own storage; inserting a
stop whose identifier is already known is rejected with an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from .domain.errors import DuplicateNodeError, NodeNotFoundError
from .domain.models import RouteNode, Vertex


@dataclass
class NodeRegistry:
    """Id-keyed collection of route nodes, in insertion order."""

    _nodes: Dict[int, RouteNode] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add(self, node: RouteNode) -> RouteNode:
        """Register a route node.

        Args:
            node: The node to register.

        Returns:
            The registered node.

        Raises:
            DuplicateNodeError: If a node with the same id is registered.
        """
        if node.node_id in self._nodes:
            self._logger.warning(
                "Duplicate route node rejected",
                extra={"node_id": node.node_id},
            )
            raise DuplicateNodeError(
                f"Registry already contains node with ID: {node.node_id}",
                node_id=node.node_id,
            )

        self._nodes[node.node_id] = node
        self._logger.debug("Route node registered", extra={"node_id": node.node_id})
        return node

    def create(
        self,
        node_id: int,
        latitude: float,
        longitude: float,
        name: Optional[str] = None,
    ) -> RouteNode:
        """Build a route node and register it.

        Raises:
            DuplicateNodeError: If a node with the same id is registered.
            ValueError: If the coordinates are out of range.
        """
        node = RouteNode(
            node_id=node_id, latitude=latitude, longitude=longitude, name=name
        )
        return self.add(node)

    def get(self, node_id: int) -> Optional[RouteNode]:
        return self._nodes.get(node_id)

    def get_or_raise(self, node_id: int) -> RouteNode:
        """Get a node by id, raising if not found.

        Raises:
            NodeNotFoundError: If the node is not registered.
        """
        node = self.get(node_id)
        if node is None:
            raise NodeNotFoundError(f"Route node not found: {node_id}", node_id=node_id)
        return node

    def nodes(self) -> List[RouteNode]:
        return list(self._nodes.values())

    def vertices(self) -> List[Vertex]:
        """Return one graph vertex per registered node, in insertion order."""
        return [node.to_vertex() for node in self._nodes.values()]

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[RouteNode]:
        return iter(list(self._nodes.values()))
