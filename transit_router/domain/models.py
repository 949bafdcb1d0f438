"""Immutable domain models for the Transit Router.

All models are frozen dataclasses with slots. They represent the
stops, lanes and computed routes of the transit network and carry no
behaviour beyond validation and simple derived properties.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )

    def as_tuple(self) -> tuple[float, float]:
        """Return ``(latitude, longitude)`` as expected by geopy."""
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class Vertex:
    """A routable point of the graph.

    Two vertices are equal when their identifiers are equal; the name
    and location are display data only.

    Attributes:
        id: Unique vertex identifier
        name: Human-readable name, defaults to the identifier
        location: GPS coordinates for the coordinate variant
    """

    id: str
    name: str = field(default="", compare=False)
    location: Optional[GeoLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.name or self.id


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted lane between two vertices.

    Attributes:
        id: Lane identifier
        source: Vertex the lane leaves from
        destination: Vertex the lane arrives at
        weight: Travel cost (duration or distance), never negative
    """

    id: str
    source: Vertex
    destination: Vertex
    weight: float

    def __post_init__(self) -> None:
        if math.isnan(self.weight) or self.weight < 0:
            raise ValueError(
                f"Lane weight must be a non-negative number, got {self.weight}"
            )

    def __str__(self) -> str:
        return f"{self.source} {self.destination}"


@dataclass(frozen=True, slots=True)
class RouteNode:
    """A bus stop as held by the node registry.

    Attributes:
        node_id: Unique stop identifier
        latitude: Stop latitude
        longitude: Stop longitude
        name: Optional stop name
    """

    node_id: int
    latitude: float
    longitude: float
    name: Optional[str] = None

    def __post_init__(self) -> None:
        # Reuse the range checks of GeoLocation.
        GeoLocation(latitude=self.latitude, longitude=self.longitude)

    @property
    def location(self) -> GeoLocation:
        """Return the stop coordinates."""
        return GeoLocation(latitude=self.latitude, longitude=self.longitude)

    def to_vertex(self) -> Vertex:
        """Convert the stop into a graph vertex keyed by its identifier."""
        vertex_id = str(self.node_id)
        return Vertex(
            id=vertex_id,
            name=self.name or vertex_id,
            location=self.location,
        )


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of route computation between two vertices.

    An empty path means that no route exists; use ``found`` rather than
    checking the path or the cost directly.

    Attributes:
        path: Ordered vertices from departure to arrival (inclusive)
        total_cost: Sum of the lane weights along the path
    """

    path: tuple[Vertex, ...]
    total_cost: float

    @classmethod
    def no_route(cls) -> RouteResult:
        """Return the explicit "no path" result."""
        return cls(path=(), total_cost=math.inf)

    @property
    def found(self) -> bool:
        """Check if a route was found."""
        return len(self.path) > 0

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.path)

    @property
    def vertex_ids(self) -> tuple[str, ...]:
        """Return the identifiers of the vertices along the route."""
        return tuple(vertex.id for vertex in self.path)
