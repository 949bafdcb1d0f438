"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the routing core to graph storage (CSV files) and to the
Dijkstra engine.
"""
