"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the routing core and the adapters
that supply graph data or compute routes. They enable dependency
injection and make the services testable.
"""

from .graph import GraphRepositoryPort, RouteSolverPort

__all__ = [
    "GraphRepositoryPort",
    "RouteSolverPort",
]
