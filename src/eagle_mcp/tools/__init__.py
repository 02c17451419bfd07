"""EAGLE import MCP tools."""

# Import modules to trigger tool registration via register_tool() calls
from . import geometry, library, names  # noqa: F401
from .registry import TOOL_REGISTRY, install_tools, register_tool

__all__ = [
    "TOOL_REGISTRY",
    "install_tools",
    "register_tool",
]
