from __future__ import annotations

from typing import Dict, Tuple

import pytest

from transit_router.domain.models import Edge, Vertex
from transit_router.graph import Graph


def make_graph(*lanes: Tuple[str, str, float]) -> Tuple[Graph, Dict[str, Vertex]]:
    """Build a graph from ``(source, destination, weight)`` triples."""
    vertices: Dict[str, Vertex] = {}
    for source, destination, _ in lanes:
        vertices.setdefault(source, Vertex(source, source))
        vertices.setdefault(destination, Vertex(destination, destination))

    edges = [
        Edge(f"Lane_{i}", vertices[s], vertices[d], w)
        for i, (s, d, w) in enumerate(lanes)
    ]
    return Graph(vertices.values(), edges), vertices


@pytest.fixture
def build_graph():
    return make_graph


@pytest.fixture
def example_graph() -> Tuple[Graph, Dict[str, Vertex]]:
    """A->B(4), A->C(1), C->B(1), B->D(1), C->D(5)."""
    return make_graph(
        ("A", "B", 4),
        ("A", "C", 1),
        ("C", "B", 1),
        ("B", "D", 1),
        ("C", "D", 5),
    )
