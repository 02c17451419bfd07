"""EAGLE import MCP server: converts EAGLE library geometry to fixed-point elements."""

__version__ = "0.1.0"
