"""
Base class for game-session adapters.

The Foundry writer talks to the game session only through ``call``; the
lifecycle methods let the service open and close it with ``async with``.
"""

from abc import ABC, abstractmethod
from typing import Any


class ToolAdapter(ABC):
    """Connection to an external game session that answers named queries."""

    @abstractmethod
    async def initialize(self) -> None:
        """
        Open the connection (spawn the process, run the handshake).

        Raises:
            ValueError: If the adapter has nothing to connect to
            FileNotFoundError: If a configured entry point is missing
        """

    @abstractmethod
    async def shutdown(self) -> None:
        """Close the connection; a no-op when it was never opened."""

    @abstractmethod
    async def call(self, tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """
        Run one query, e.g. ``foundry-mcp-bridge.createActor``, and return its decoded reply.

        Raises:
            RuntimeError: If called before initialize()
        """

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.shutdown()
        return False
