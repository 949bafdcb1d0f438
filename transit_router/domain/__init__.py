"""Domain layer - Core routing models and errors.

This module contains immutable domain models and typed errors
used throughout the application.
"""

from .errors import (
    ConfigurationError,
    DuplicateNodeError,
    GraphError,
    InvalidIndexError,
    NodeNotFoundError,
    TransitRouterError,
    UnknownSourceError,
    UnreachableTargetError,
)
from .models import Edge, GeoLocation, RouteNode, RouteResult, Vertex

__all__ = [
    # Models
    "GeoLocation",
    "Vertex",
    "Edge",
    "RouteNode",
    "RouteResult",
    # Errors
    "TransitRouterError",
    "InvalidIndexError",
    "UnknownSourceError",
    "UnreachableTargetError",
    "DuplicateNodeError",
    "NodeNotFoundError",
    "GraphError",
    "ConfigurationError",
]
