"""
NPCToolService — the three NPC tools behind every surface.

    create_custom_npc               generate, optionally write to Foundry, render the sheet
    list_npc_archetypes             render the archetype reference
    calculate_npc_xp_distribution   render an allocation preview

The CLI, the MCP server and the Discord cog all call into this class, so
argument validation, logging and rendering behave the same everywhere.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import AsyncExitStack, asynccontextmanager
from typing import Any

from npcforge.config.logging import get_logger
from npcforge.config.settings import Settings
from npcforge.generation.generator import NPCGenerator
from npcforge.npc.foundry import FoundryNPCWriter
from npcforge.npc.models import (
    MAX_TOTAL_XP,
    CreateNPCRequest,
    DistributionRequest,
    NPCToolError,
    parse_request,
)
from npcforge.npc.report import (
    render_archetype_list,
    render_distribution_preview,
    render_npc_report,
)
from npcforge.tools.foundry_bridge import FoundryBridgeTool

logger = get_logger(__name__)


class NPCToolService:
    """
    Validate tool arguments, run the generator and render the result.

    Args:
        generator: NPC generator (catalogs + allocator)
        writer: Foundry writer; None means NPCs are only ever previewed
        default_species: Species used when a request names none
        max_xp: Largest XP budget accepted by create_custom_npc
    """

    def __init__(
        self,
        generator: NPCGenerator,
        writer: FoundryNPCWriter | None = None,
        default_species: str = "human",
        max_xp: int = MAX_TOTAL_XP,
    ):
        self.generator = generator
        self.writer = writer
        self._default_species = default_species
        self._max_xp = max_xp

    def _with_defaults(self, arguments: dict[str, Any]) -> dict[str, Any]:
        cleaned = {key: value for key, value in arguments.items() if value is not None}
        cleaned.setdefault("species", self._default_species)
        return cleaned

    def _note_fallback(self, archetype_id: str) -> None:
        if archetype_id not in self.generator.archetypes:
            logger.warning(
                f"Unknown archetype {archetype_id!r}; using {self.generator.archetypes.default_id!r}"
            )

    async def create_custom_npc(self, arguments: dict[str, Any]) -> str:
        """
        Generate an NPC and, if requested and possible, create it in Foundry.

        Raises:
            NPCToolError: If the arguments are invalid
        """
        request = parse_request(CreateNPCRequest, self._with_defaults(arguments))
        if request.total_xp > self._max_xp:
            raise NPCToolError(f"Invalid arguments: totalXP must be at most {self._max_xp}")

        logger.info(
            f"Creating custom NPC {request.name!r} "
            f"(xp={request.total_xp}, archetype={request.archetype}, species={request.species}, "
            f"createInFoundry={request.create_in_foundry})"
        )
        self._note_fallback(request.archetype)

        npc = self.generator.generate(request.total_xp, request.archetype, request.species)

        actor_id = None
        if request.create_in_foundry:
            if self.writer is None:
                logger.info("Foundry bridge not configured; returning a preview")
            else:
                actor_id = await self.writer.create(request, npc)

        return render_npc_report(request, npc, actor_id=actor_id)

    async def list_archetypes(self) -> str:
        logger.info("Listing NPC archetypes")
        return render_archetype_list(self.generator.archetypes)

    async def calculate_distribution(self, arguments: dict[str, Any]) -> str:
        """
        Preview how an XP budget would be spent, without creating anything.

        Raises:
            NPCToolError: If the arguments are invalid
        """
        request = parse_request(DistributionRequest, self._with_defaults(arguments))
        logger.info(
            f"Calculating XP distribution preview "
            f"(xp={request.total_xp}, archetype={request.archetype}, species={request.species})"
        )
        self._note_fallback(request.archetype)

        archetype = self.generator.archetypes.get(request.archetype)
        allocation = self.generator.allocate(request.total_xp, request.archetype, request.species)
        return render_distribution_preview(archetype.name, allocation)


@asynccontextmanager
async def open_service(settings: Settings, connect_foundry: bool = True) -> AsyncIterator[NPCToolService]:
    """
    Build an NPCToolService from settings, connecting the Foundry bridge if configured.

    The bridge subprocess (if any) lives for the duration of the context.
    """
    generator = NPCGenerator.from_defaults(max_advances=settings.generator.max_advances)

    async with AsyncExitStack() as stack:
        writer = None
        if connect_foundry and settings.foundry.bridge_path:
            logger.info(f"Connecting Foundry bridge: {settings.foundry.bridge_path}")
            bridge = FoundryBridgeTool(settings.foundry.bridge_path, command=settings.foundry.bridge_command)
            adapter = await stack.enter_async_context(bridge)
            writer = FoundryNPCWriter(adapter, query_prefix=settings.foundry.query_prefix)
        elif connect_foundry:
            logger.info("Foundry bridge not configured (FOUNDRY__BRIDGE_PATH not set); previews only")

        yield NPCToolService(
            generator,
            writer=writer,
            default_species=settings.generator.default_species,
            max_xp=settings.generator.max_xp,
        )
