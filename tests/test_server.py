"""Tests for tool listing and dispatch through an MCP client session."""

import json
import sys
from pathlib import Path

import pytest
from mcp import ClientSession
from mcp.client.stdio import StdioServerParameters, stdio_client
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND

from framer_plugin_mcp import server
from framer_plugin_mcp.server import app, call_tool

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.mark.anyio
async def test_list_tools_is_static():
    async with create_connected_server_and_client_session(app) as session:
        first = await session.list_tools()
        second = await session.list_tools()

    assert [tool.name for tool in first.tools] == ["create_plugin", "build_plugin"]
    assert [t.model_dump() for t in first.tools] == [t.model_dump() for t in second.tools]

    create_schema = first.tools[0].inputSchema
    assert create_schema["required"] == ["name", "description", "outputPath"]
    assert create_schema["properties"]["web3Features"]["items"]["enum"] == [
        "wallet-connect",
        "contract-interaction",
        "nft-display",
    ]
    assert first.tools[1].inputSchema["required"] == ["pluginPath"]


@pytest.mark.anyio
async def test_unknown_tool_is_rejected(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    async with create_connected_server_and_client_session(app) as session:
        with pytest.raises(McpError) as exc_info:
            await session.call_tool("delete_plugin", {"pluginPath": str(tmp_path)})

    assert exc_info.value.error.code == METHOD_NOT_FOUND
    assert "delete_plugin" in exc_info.value.error.message
    assert list(tmp_path.iterdir()) == []


@pytest.mark.anyio
async def test_create_plugin_over_session(tmp_path):
    output = tmp_path / "widget"

    async with create_connected_server_and_client_session(app) as session:
        result = await session.call_tool(
            "create_plugin",
            {"name": "widget", "description": "d", "outputPath": str(output)},
        )

    assert not result.isError
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert str(output.resolve()) in result.content[0].text
    assert json.loads((output / "package.json").read_text())["name"] == "widget"


@pytest.mark.anyio
async def test_build_missing_directory_is_internal_error(tmp_path):
    missing = tmp_path / "missing"

    async with create_connected_server_and_client_session(app) as session:
        with pytest.raises(McpError) as exc_info:
            await session.call_tool("build_plugin", {"pluginPath": str(missing)})

    error = exc_info.value.error
    assert error.code == INTERNAL_ERROR
    assert error.message == f"Failed to build plugin: Plugin directory not found: {missing.resolve()}"


@pytest.mark.anyio
@pytest.mark.parametrize(
    "arguments",
    [
        {"name": "widget", "description": "d"},
        {"name": "", "description": "d", "outputPath": "out"},
        {"name": "widget", "description": "d", "outputPath": "out", "web3Features": ["dao-voting"]},
        {"name": 42, "description": "d", "outputPath": "out"},
    ],
)
async def test_invalid_create_arguments(tmp_path, monkeypatch, arguments):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(McpError) as exc_info:
        await call_tool("create_plugin", arguments)

    assert exc_info.value.error.code == INVALID_PARAMS
    assert exc_info.value.error.message.startswith("Invalid arguments for create_plugin:")
    assert list(tmp_path.iterdir()) == []


@pytest.mark.anyio
async def test_invalid_build_arguments_spawn_nothing(monkeypatch):
    async def fail_build(*args, **kwargs):
        raise AssertionError("build_plugin should not be called")

    monkeypatch.setattr(server, "build_plugin", fail_build)

    with pytest.raises(McpError) as exc_info:
        await call_tool("build_plugin", None)

    assert exc_info.value.error.code == INVALID_PARAMS
    assert "pluginPath" in exc_info.value.error.message


@pytest.mark.anyio
async def test_create_failure_is_internal_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(McpError) as exc_info:
        await call_tool(
            "create_plugin",
            {"name": "widget", "description": "d", "outputPath": str(blocker / "plugin")},
        )

    assert exc_info.value.error.code == INTERNAL_ERROR
    assert exc_info.value.error.message.startswith("Failed to create plugin: ")


@pytest.mark.anyio
async def test_build_uses_configured_command(tmp_path, monkeypatch):
    calls = []

    async def fake_build(request, command=None, timeout=None):
        calls.append((request.plugin_path, command, timeout))
        return "built"

    monkeypatch.setenv("FRAMER_PLUGIN_BUILD_COMMAND", "yarn build --silent")
    monkeypatch.setenv("FRAMER_PLUGIN_BUILD_TIMEOUT", "30")
    monkeypatch.setattr(server, "build_plugin", fake_build)

    result = await call_tool("build_plugin", {"pluginPath": str(tmp_path)})

    assert result[0].text == "built"
    assert calls == [(str(tmp_path), ["yarn", "build", "--silent"], 30.0)]


@pytest.mark.anyio
async def test_stdio_end_to_end(tmp_path):
    server_params = StdioServerParameters(
        command=sys.executable,
        args=["-m", "framer_plugin_mcp"],
        cwd=str(PROJECT_ROOT),
    )
    output = tmp_path / "my-cool-plugin"

    async with stdio_client(server_params) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            init = await session.initialize()
            assert init.serverInfo.name == "framer-plugin"

            tools = await session.list_tools()
            assert [tool.name for tool in tools.tools] == ["create_plugin", "build_plugin"]

            result = await session.call_tool(
                "create_plugin",
                {
                    "name": "my-cool-plugin",
                    "description": "Cool",
                    "outputPath": str(output),
                    "web3Features": ["wallet-connect"],
                },
            )
            assert "Successfully created Framer plugin project" in result.content[0].text

    index = (output / "src" / "index.tsx").read_text()
    assert "export default function my_cool_plugin()" in index
    assert "defaultValue: 'Connect Wallet'" in index
