"""Exception hierarchy for the tool boundary.

The conversion core never raises for well-formed records; these types are
raised while turning raw attribute mappings into records and are reported
back to MCP clients as JSON objects.
"""

from __future__ import annotations

from typing import Any


class EagleMcpError(Exception):
    """Base exception for all EAGLE MCP errors."""

    error_code: str = ""

    def __init__(self, message: str, error_code: str | None = None, **kwargs: Any):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.__dict__.update(kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a serializable dict."""
        result: dict[str, Any] = {
            "error": True,
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
        }
        result.update(
            {k: v for k, v in self.__dict__.items() if k not in ["message", "error_code"]}
        )
        return result


class ValidationError(EagleMcpError):
    """Raised when an attribute record fails validation."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, **kwargs: Any):
        super().__init__(message, "VALIDATION_ERROR", field=field, **kwargs)


class UnknownElementError(EagleMcpError):
    """Raised when a tool is asked for an element kind it does not know."""

    error_code = "UNKNOWN_ELEMENT"

    def __init__(self, message: str, kind: str | None = None, **kwargs: Any):
        super().__init__(message, "UNKNOWN_ELEMENT", kind=kind, **kwargs)


class ToolExecutionError(EagleMcpError):
    """Raised when a tool execution fails."""

    error_code = "TOOL_EXECUTION_ERROR"

    def __init__(self, message: str, tool_name: str | None = None, **kwargs: Any):
        super().__init__(message, "TOOL_EXECUTION_ERROR", tool_name=tool_name, **kwargs)


__all__ = [
    "EagleMcpError",
    "ToolExecutionError",
    "UnknownElementError",
    "ValidationError",
]
