"""
MCP-based Foundry VTT bridge adapter.

The Foundry bridge is a small node process that relays query handlers
registered by the Foundry module (``foundry-mcp-bridge.createActor``,
``foundry-mcp-bridge.createItem``, ...) as MCP tools. This adapter spawns it
and talks JSON-RPC over stdio.

Bridge replies are JSON documents carried in MCP text content; call()
decodes them into dictionaries.
"""

import json
import os
from pathlib import Path
from typing import Any

from mcp import ClientSession
from mcp.client.stdio import StdioServerParameters, stdio_client

from npcforge.config.logging import get_logger
from npcforge.tools.base import ToolAdapter

logger = get_logger(__name__)


class FoundryBridgeError(RuntimeError):
    """The bridge rejected a query or returned something we cannot read."""


class FoundryBridgeTool(ToolAdapter):
    """
    Foundry bridge client using the MCP protocol.

    Args:
        bridge_path: Path to the bridge entry script. If None, uses the
                     FOUNDRY_BRIDGE_PATH environment variable.
        command: Executable that runs the script (default: node)
    """

    def __init__(self, bridge_path: str | None = None, command: str = "node"):
        self._initialized = False
        self._session = None
        self._read_stream = None
        self._write_stream = None
        self._stdio_context = None
        self._session_context = None

        if bridge_path is None:
            bridge_path = os.environ.get("FOUNDRY_BRIDGE_PATH")

        self._bridge_path = bridge_path
        self._command = command

    async def initialize(self) -> None:
        """Start the bridge subprocess and perform the MCP handshake."""
        if self._bridge_path is None:
            raise ValueError(
                "Foundry bridge path not specified. "
                "Provide bridge_path argument to __init__ or set FOUNDRY_BRIDGE_PATH environment variable."
            )

        bridge_path = Path(self._bridge_path)
        if not bridge_path.exists():
            raise FileNotFoundError(f"Foundry bridge not found at: {bridge_path}")

        server_params = StdioServerParameters(
            command=self._command,
            args=[str(bridge_path)],
        )

        self._stdio_context = stdio_client(server_params)
        self._read_stream, self._write_stream = await self._stdio_context.__aenter__()

        self._session_context = ClientSession(self._read_stream, self._write_stream)
        self._session = await self._session_context.__aenter__()

        await self._session.initialize()

        self._initialized = True
        logger.info(f"Foundry bridge connected: {bridge_path}")

    async def shutdown(self) -> None:
        """Cleanly shut down the bridge subprocess."""
        if not self._initialized:
            return

        if self._session_context is not None:
            await self._session_context.__aexit__(None, None, None)
            self._session_context = None
            self._session = None

        if self._stdio_context is not None:
            await self._stdio_context.__aexit__(None, None, None)
            self._stdio_context = None
            self._read_stream = None
            self._write_stream = None

        self._initialized = False

    async def call(self, tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """
        Invoke a bridge query and decode its JSON reply.

        Raises:
            RuntimeError: If the adapter is not initialized
            FoundryBridgeError: If the bridge reports an error or replies with
                                something other than a JSON object
        """
        if not self._initialized:
            raise RuntimeError("Tool adapter not initialized")

        result = await self._session.call_tool(tool_name, arguments)

        text = "".join(
            content.text for content in result.content if hasattr(content, "text")
        )

        if getattr(result, "isError", False):
            raise FoundryBridgeError(f"{tool_name} failed: {text or 'no details'}")

        return decode_bridge_reply(tool_name, text)


def decode_bridge_reply(tool_name: str, text: str) -> dict[str, Any]:
    """Parse a bridge reply; an empty reply decodes to an empty dict."""
    if not text.strip():
        return {}
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise FoundryBridgeError(f"{tool_name} returned non-JSON reply: {text[:200]!r}") from e
    if not isinstance(payload, dict):
        raise FoundryBridgeError(f"{tool_name} returned {type(payload).__name__}, expected an object")
    return payload
