"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Computes routes between stops of the network
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
