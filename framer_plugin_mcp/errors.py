"""Error helpers shared by the server and the plugin tools."""

from mcp.shared.exceptions import McpError
from mcp.types import ErrorData, INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND


class PluginError(RuntimeError):
    """A plugin tool could not complete."""


def unknown_tool(name: str) -> McpError:
    return McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))


def invalid_arguments(name: str, details: str) -> McpError:
    return McpError(ErrorData(code=INVALID_PARAMS, message=f"Invalid arguments for {name}: {details}"))


def internal_error(message: str) -> McpError:
    return McpError(ErrorData(code=INTERNAL_ERROR, message=message))
