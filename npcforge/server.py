"""
MCP server exposing the NPC tools over stdio.

    create_custom_npc                generate an NPC (and write it to Foundry)
    list_npc_archetypes              archetype reference
    calculate_npc_xp_distribution    XP distribution preview

Every tool returns markdown text. Invalid arguments come back as an
``Error: ...`` message rather than a protocol error, so the calling model
can read and correct them.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from mcp.server.fastmcp import Context, FastMCP

from npcforge.config.logging import get_logger
from npcforge.config.settings import Settings
from npcforge.npc.models import NPCToolError
from npcforge.npc.service import NPCToolService, open_service

logger = get_logger(__name__)


def create_server(settings: Settings) -> FastMCP:
    """Build the FastMCP server; the Foundry bridge is opened in the server lifespan."""

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[NPCToolService]:
        async with open_service(settings) as service:
            logger.info("NPC tool server ready")
            yield service

    mcp = FastMCP("npcforge", lifespan=lifespan)

    def _service(ctx: Context) -> NPCToolService:
        return ctx.request_context.lifespan_context

    @mcp.tool()
    async def create_custom_npc(
        ctx: Context,
        name: str,
        totalXP: int,
        archetype: str,
        species: str | None = None,
        personalityTraits: list[str] | None = None,
        career: str | None = None,
        description: str | None = None,
        createInFoundry: bool = True,
    ) -> str:
        """
        Create a custom WFRP 4e NPC from an XP budget and an archetype.

        XP is split 60% characteristics, 25% skills, 15% talents. Use
        list_npc_archetypes for the archetype ids. 500-1000 XP is a novice,
        4000+ XP a master.
        """
        arguments = {
            "name": name,
            "totalXP": totalXP,
            "archetype": archetype,
            "species": species,
            "personalityTraits": personalityTraits,
            "career": career,
            "description": description,
            "createInFoundry": createInFoundry,
        }
        try:
            return await _service(ctx).create_custom_npc(arguments)
        except NPCToolError as e:
            logger.warning(f"create_custom_npc rejected: {e}")
            return f"Error: {e}"

    @mcp.tool()
    async def list_npc_archetypes(ctx: Context) -> str:
        """List all NPC archetypes with their characteristic priorities, skills and talents."""
        return await _service(ctx).list_archetypes()

    @mcp.tool()
    async def calculate_npc_xp_distribution(
        ctx: Context,
        totalXP: int,
        archetype: str,
        species: str | None = None,
    ) -> str:
        """Preview how an XP budget would be distributed for an archetype, without creating anything."""
        try:
            return await _service(ctx).calculate_distribution(
                {"totalXP": totalXP, "archetype": archetype, "species": species}
            )
        except NPCToolError as e:
            logger.warning(f"calculate_npc_xp_distribution rejected: {e}")
            return f"Error: {e}"

    return mcp


def run_server(settings: Settings) -> None:
    """Run the server on stdio until the client disconnects."""
    logger.info("Starting NPC tool server on stdio")
    create_server(settings).run(transport="stdio")
