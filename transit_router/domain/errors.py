"""Typed domain errors for the Transit Router.

Every failure of graph construction, registry insertion or route
computation is raised as one of these types so that callers can
observe and handle it; nothing is caught and merely printed.

All errors inherit from TransitRouterError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TransitRouterError(Exception):
    """Base error for the transit router domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidIndexError(TransitRouterError):
    """A lane referenced a vertex position outside the vertex sequence.

    Attributes:
        index: The offending position
        size: Number of vertices known to the graph
    """

    index: int = -1
    size: int = 0


@dataclass
class UnknownSourceError(TransitRouterError):
    """A traversal was requested from a vertex the graph does not hold.

    Attributes:
        vertex_id: Identifier of the rejected source vertex
    """

    vertex_id: str = ""


@dataclass
class UnreachableTargetError(TransitRouterError):
    """No path exists from the traversal source to the target.

    Attributes:
        source_id: Identifier of the traversal source
        target_id: Identifier of the requested target
    """

    source_id: str = ""
    target_id: str = ""


@dataclass
class DuplicateNodeError(TransitRouterError):
    """A route node with the same identifier is already registered.

    Attributes:
        node_id: The identifier that is already taken
    """

    node_id: Optional[int] = None


@dataclass
class NodeNotFoundError(TransitRouterError):
    """Route node identifier not found in the registry.

    Attributes:
        node_id: The identifier that was looked up
    """

    node_id: Optional[int] = None


@dataclass
class GraphError(TransitRouterError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(TransitRouterError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
