"""Tool registry: every conversion tool is declared here once, then installed on a server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastmcp import FastMCP


@dataclass(frozen=True)
class ToolSpec:
    """A conversion tool; ``category`` becomes the tool's MCP tag."""

    name: str
    description: str
    handler: Callable[..., dict[str, Any]]
    category: str


TOOL_REGISTRY: dict[str, ToolSpec] = {}


def register_tool(
    name: str,
    description: str,
    handler: Callable[..., dict[str, Any]],
    *,
    category: str,
) -> None:
    """Register a tool in the global registry."""
    if name in TOOL_REGISTRY:
        raise ValueError(f"Tool {name!r} registered twice")
    TOOL_REGISTRY[name] = ToolSpec(
        name=name, description=description, handler=handler, category=category
    )


def install_tools(mcp: FastMCP) -> int:
    """Add every registered tool to ``mcp``, tagged with its category."""
    for spec in TOOL_REGISTRY.values():
        mcp.tool(
            spec.handler,
            name=spec.name,
            description=spec.description,
            tags={spec.category},
        )
    return len(TOOL_REGISTRY)
