"""Single-source shortest paths using Dijkstra's algorithm.

``ShortestPath`` snapshots a graph and computes, for a given source,
the minimum cost to every reachable vertex together with the
predecessor links needed to rebuild each route. Every call to
``execute`` works on its own traversal state and returns an immutable
``ShortestPathTree``, so results from different sources never mix.

Frontier ties (equal distance) are settled by lowest vertex
identifier, numeric identifiers compared by value. When several lanes
join the same pair of vertices, the first one in edge order provides
the weight (first-match, not minimum-match).
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Set, Tuple

from ..domain.errors import UnknownSourceError, UnreachableTargetError
from ..domain.models import Edge, Vertex
from .graph import Graph

# Numeric ids sort by value (9 before 10), ahead of any other id.
_IdKey = Tuple[int, int, str]

# (distance, id key, insertion counter, vertex)
_FrontierEntry = Tuple[float, _IdKey, int, Vertex]


def _id_key(vertex_id: str) -> _IdKey:
    if vertex_id.isascii() and vertex_id.isdigit():
        return (0, int(vertex_id), vertex_id)
    return (1, 0, vertex_id)


@dataclass(frozen=True, eq=False)
class ShortestPathTree:
    """Distances and predecessors computed from one source.

    Vertices that were never reached are absent from both mappings.

    Attributes:
        source: The traversal source
        distances: Minimum cost from the source to each reached vertex
        predecessors: Vertex preceding each reached vertex on its route
        settled: Vertices in the order they were finalized
    """

    source: Vertex
    distances: Mapping[Vertex, float]
    predecessors: Mapping[Vertex, Vertex]
    settled: Tuple[Vertex, ...] = field(default_factory=tuple)

    def is_reachable(self, target: Vertex) -> bool:
        return target in self.distances

    def distance_to(self, target: Vertex) -> float:
        """Return the minimum cost from the source to ``target``.

        Raises:
            UnreachableTargetError: If the target was not reached.
        """
        if target not in self.distances:
            raise self._unreachable(target)
        return self.distances[target]

    def path_to(self, target: Vertex) -> Tuple[Vertex, ...]:
        """Rebuild the route from the source to ``target``.

        Walks the predecessor links back until the source, which has no
        predecessor, then reverses the collected vertices.

        Returns:
            The vertices from source to target, both inclusive.

        Raises:
            UnreachableTargetError: If the target was not reached.
        """
        if target not in self.distances:
            raise self._unreachable(target)

        path: List[Vertex] = [target]
        step = target
        while step in self.predecessors:
            step = self.predecessors[step]
            path.append(step)

        path.reverse()
        return tuple(path)

    def _unreachable(self, target: Vertex) -> UnreachableTargetError:
        return UnreachableTargetError(
            f"No path from {self.source.id} to {target.id}",
            source_id=self.source.id,
            target_id=target.id,
        )


class ShortestPath:
    """Dijkstra engine over a static snapshot of a graph."""

    def __init__(self, graph: Graph) -> None:
        self._vertices: Tuple[Vertex, ...] = graph.vertices
        self._edges: Tuple[Edge, ...] = graph.edges
        self._known: frozenset[Vertex] = frozenset(self._vertices)

        # source -> {destination: weight of the first matching edge}
        self._adjacency: Dict[Vertex, Dict[Vertex, float]] = {}
        for edge in self._edges:
            self._adjacency.setdefault(edge.source, {}).setdefault(
                edge.destination, edge.weight
            )

        self._logger = logging.getLogger(__name__)

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return self._vertices

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def execute(self, source: Vertex) -> ShortestPathTree:
        """Compute shortest paths from ``source`` to every vertex.

        Args:
            source: The vertex to start from; must belong to the graph.

        Returns:
            The distances and predecessors of every reached vertex.

        Raises:
            UnknownSourceError: If the source is not a vertex of the graph.
        """
        if source not in self._known:
            raise UnknownSourceError(
                f"Source vertex not in graph: {source.id}",
                vertex_id=source.id,
            )

        self._logger.debug(
            "Running Dijkstra",
            extra={"source": source.id, "vertices": len(self._known)},
        )

        visited: Set[Vertex] = set()
        settled: List[Vertex] = []
        distance: Dict[Vertex, float] = {source: 0.0}
        predecessors: Dict[Vertex, Vertex] = {}

        counter = itertools.count()
        frontier: List[_FrontierEntry] = [
            (0.0, _id_key(source.id), next(counter), source)
        ]

        while frontier:
            current_distance, _, _, node = heapq.heappop(frontier)

            # Stale entry left behind by a later improvement.
            if node in visited:
                continue

            visited.add(node)
            settled.append(node)

            for target, weight in self._adjacency.get(node, {}).items():
                if target in visited:
                    continue
                candidate = current_distance + weight
                if candidate < distance.get(target, float("inf")):
                    distance[target] = candidate
                    predecessors[target] = node
                    heapq.heappush(
                        frontier, (candidate, _id_key(target.id), next(counter), target)
                    )

        self._logger.debug(
            "Dijkstra finished",
            extra={"source": source.id, "reached": len(distance)},
        )

        return ShortestPathTree(
            source=source,
            distances=MappingProxyType(distance),
            predecessors=MappingProxyType(predecessors),
            settled=tuple(settled),
        )

    def edge_weight(self, source: Vertex, destination: Vertex) -> Optional[float]:
        """Return the weight of the first lane from ``source`` to ``destination``.

        Returns:
            The weight, or None when no lane joins the two vertices.
        """
        return self._adjacency.get(source, {}).get(destination)

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        """Return the distinct destinations of ``vertex``'s lanes, in edge order."""
        return list(self._adjacency.get(vertex, {}))
