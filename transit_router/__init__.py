"""Top-level package for the Transit Router project.

This package exposes the shortest-path engine used by the transit
mapping application: route nodes are collected in a registry, turned
into a directed weighted graph, and Dijkstra's algorithm computes the
cheapest route from a chosen stop to every other stop.
"""

from .domain.errors import (
    DuplicateNodeError,
    InvalidIndexError,
    TransitRouterError,
    UnknownSourceError,
    UnreachableTargetError,
)
from .domain.models import Edge, GeoLocation, RouteNode, RouteResult, Vertex
from .graph import Graph, ShortestPath, ShortestPathTree
from .registry import NodeRegistry

__all__ = [
    "Edge",
    "GeoLocation",
    "Graph",
    "NodeRegistry",
    "RouteNode",
    "RouteResult",
    "ShortestPath",
    "ShortestPathTree",
    "Vertex",
    "TransitRouterError",
    "DuplicateNodeError",
    "InvalidIndexError",
    "UnknownSourceError",
    "UnreachableTargetError",
]
