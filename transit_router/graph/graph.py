"""Graph container for the transit network.

A Graph aggregates the vertices and directed lanes handed to one
shortest-path computation. It does not deduplicate anything: repeated
vertex identifiers, self-loops and parallel lanes are kept as given.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from geopy.distance import geodesic

from ..domain.errors import GraphError, InvalidIndexError
from ..domain.models import Edge, Vertex

if TYPE_CHECKING:
    from ..registry import NodeRegistry

logger = logging.getLogger(__name__)


class Graph:
    """Vertices and directed weighted edges of one computation."""

    def __init__(self, vertices: Iterable[Vertex], edges: Iterable[Edge] = ()) -> None:
        self._vertices: List[Vertex] = list(vertices)
        self._edges: List[Edge] = list(edges)

    @classmethod
    def from_registry(cls, registry: NodeRegistry) -> Graph:
        """Build a graph without lanes from the nodes of a registry."""
        return cls(registry.vertices())

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._vertices)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def add_lane(
        self,
        source_index: int,
        destination_index: int,
        duration: float,
        lane_id: Optional[str] = None,
    ) -> Edge:
        """Add a lane between the vertices at two positions.

        Args:
            source_index: Position of the departure vertex.
            destination_index: Position of the arrival vertex.
            duration: Lane weight.
            lane_id: Optional lane identifier, ``Lane_<n>`` by default.

        Returns:
            The created edge.

        Raises:
            InvalidIndexError: If either position is out of range.
            ValueError: If the duration is negative.
        """
        source = self._vertex_at(source_index)
        destination = self._vertex_at(destination_index)
        return self._append(lane_id, source, destination, duration)

    def add_geodesic_lane(
        self,
        source_index: int,
        destination_index: int,
        lane_id: Optional[str] = None,
    ) -> Edge:
        """Add a lane weighted by the geodesic distance in kilometres.

        Raises:
            InvalidIndexError: If either position is out of range.
            GraphError: If either vertex has no location.
        """
        source = self._vertex_at(source_index)
        destination = self._vertex_at(destination_index)

        for vertex in (source, destination):
            if vertex.location is None:
                raise GraphError(f"Vertex {vertex.id} has no location")

        assert source.location is not None and destination.location is not None
        distance_km = geodesic(
            source.location.as_tuple(), destination.location.as_tuple()
        ).km
        return self._append(lane_id, source, destination, distance_km)

    def _vertex_at(self, index: int) -> Vertex:
        # Negative positions are rejected too, no wrap-around.
        if not 0 <= index < len(self._vertices):
            raise InvalidIndexError(
                f"Vertex index {index} out of range for {len(self._vertices)} vertices",
                index=index,
                size=len(self._vertices),
            )
        return self._vertices[index]

    def _append(
        self,
        lane_id: Optional[str],
        source: Vertex,
        destination: Vertex,
        weight: float,
    ) -> Edge:
        edge = Edge(
            id=lane_id or f"Lane_{len(self._edges)}",
            source=source,
            destination=destination,
            weight=weight,
        )
        self._edges.append(edge)
        logger.debug(
            "Lane added",
            extra={"lane_id": edge.id, "source": source.id, "destination": destination.id},
        )
        return edge

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"
