"""MCP server exposing the Framer plugin scaffolding tools."""

import logging
import sys

import anyio
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolRequest, CallToolResult, ServerResult, TextContent, Tool
from pydantic import BaseModel, ValidationError

from framer_plugin_mcp.config import get_settings
from framer_plugin_mcp.errors import internal_error, invalid_arguments, unknown_tool
from framer_plugin_mcp.schemas import WEB3_FEATURES, BuildPluginRequest, CreatePluginRequest
from framer_plugin_mcp.tools import build_plugin, create_plugin

logger = logging.getLogger(__name__)

SERVER_NAME = "framer-plugin"
SERVER_VERSION = "0.1.0"


# Define available tools
TOOLS = [
    Tool(
        name="create_plugin",
        description="Create a new Framer plugin project with web3 capabilities",
        inputSchema={
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "Plugin name"
                },
                "description": {
                    "type": "string",
                    "description": "Plugin description"
                },
                "outputPath": {
                    "type": "string",
                    "description": "Output directory path"
                },
                "web3Features": {
                    "type": "array",
                    "items": {
                        "type": "string",
                        "enum": WEB3_FEATURES
                    },
                    "description": "Web3 features to include"
                }
            },
            "required": ["name", "description", "outputPath"]
        }
    ),
    Tool(
        name="build_plugin",
        description="Build a Framer plugin project",
        inputSchema={
            "type": "object",
            "properties": {
                "pluginPath": {
                    "type": "string",
                    "description": "Path to plugin directory"
                }
            },
            "required": ["pluginPath"]
        }
    ),
]


# Create MCP server
app = Server(SERVER_NAME, version=SERVER_VERSION)


def _validate(model: type[BaseModel], name: str, arguments: dict):
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        )
        raise invalid_arguments(name, details) from e


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return TOOLS


async def call_tool(name: str, arguments: dict | None) -> list[TextContent]:
    """
    Dispatch a tool call by exact name.

    Raises:
        McpError: METHOD_NOT_FOUND for unknown tools, INVALID_PARAMS when the
            arguments do not match the tool schema, INTERNAL_ERROR when the
            tool itself fails.
    """
    arguments = arguments or {}
    logger.info("Tool call: %s", name)

    if name == "create_plugin":
        request = _validate(CreatePluginRequest, name, arguments)
        try:
            result = await create_plugin(request)
        except Exception as e:
            logger.exception("create_plugin failed")
            raise internal_error(f"Failed to create plugin: {e}") from e

    elif name == "build_plugin":
        request = _validate(BuildPluginRequest, name, arguments)
        settings = get_settings()
        try:
            result = await build_plugin(
                request,
                command=settings.build_command,
                timeout=settings.build_timeout,
            )
        except Exception as e:
            logger.exception("build_plugin failed")
            raise internal_error(f"Failed to build plugin: {e}") from e

    else:
        raise unknown_tool(name)

    return [TextContent(type="text", text=result)]


async def _handle_call_tool(req: CallToolRequest) -> ServerResult:
    # Registered directly so McpError reaches the client as a JSON-RPC error
    content = await call_tool(req.params.name, req.params.arguments)
    return ServerResult(CallToolResult(content=content, isError=False))


app.request_handlers[CallToolRequest] = _handle_call_tool


async def run_server():
    """Run the MCP server."""
    logger.info("Framer Plugin MCP server running on stdio")

    try:
        async with stdio_server() as streams:
            await app.run(streams[0], streams[1], app.create_initialization_options())
    except Exception:
        logger.exception("Server error")
        raise


def main():
    """Entry point for the server."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )
    try:
        anyio.run(run_server)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
