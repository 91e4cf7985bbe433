"""Sliding-tile puzzle solver (depth-bounded A* with Manhattan distance)."""

__version__ = "0.1.0"
