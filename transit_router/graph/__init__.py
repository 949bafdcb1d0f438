"""Graph-related utilities for representing the transit network.

This subpackage contains the graph container built from route nodes
and lanes, and the Dijkstra engine that runs on top of it.
"""

from .dijkstra import ShortestPath, ShortestPathTree
from .graph import Graph

__all__ = ["Graph", "ShortestPath", "ShortestPathTree"]
