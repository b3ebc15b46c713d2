"""Run a plugin project's build script."""

import logging
import shlex
import sys
from typing import Awaitable, Callable, List, Optional

import anyio

from framer_plugin_mcp.errors import PluginError
from framer_plugin_mcp.schemas import BuildPluginRequest

logger = logging.getLogger(__name__)

DEFAULT_BUILD_COMMAND = ["npm", "run", "build"]

ProcessRunner = Callable[..., Awaitable[object]]


async def build_plugin(
    request: BuildPluginRequest,
    command: Optional[List[str]] = None,
    timeout: Optional[float] = None,
    run_process: ProcessRunner = anyio.run_process,
) -> str:
    """
    Build the plugin project at ``request.plugin_path``.

    The build output goes to this process's stderr because stdout carries
    the MCP stream. Cancelling the calling task terminates the build.

    Args:
        request: Validated build_plugin arguments
        command: Build command line, ``npm run build`` when omitted
        timeout: Seconds to wait for the build, or None to wait indefinitely
        run_process: Coroutine used to spawn the build (``anyio.run_process``)

    Returns:
        Confirmation message with the absolute project path
    """
    plugin_dir = await anyio.Path(request.plugin_path).resolve()
    if not await plugin_dir.is_dir():
        raise PluginError(f"Plugin directory not found: {plugin_dir}")

    command = command or DEFAULT_BUILD_COMMAND
    logger.info("Building plugin in %s: %s", plugin_dir, shlex.join(command))

    try:
        with anyio.fail_after(timeout):
            await run_process(
                command,
                cwd=str(plugin_dir),
                stdout=sys.stderr,
                stderr=sys.stderr,
                check=True,
            )
    except TimeoutError:
        raise PluginError(f"Build timed out after {timeout} seconds: {plugin_dir}")

    return f"Successfully built plugin at {plugin_dir}"
