"""Heuristic structure extraction for Java source trees, served over MCP."""

__version__ = "0.1.0"
