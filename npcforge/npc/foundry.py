"""
Writing generated NPCs into a Foundry VTT world.

A GeneratedNPC becomes one WFRP4e ``character`` actor (the system uses the
same actor type for PCs and NPCs) followed by one embedded item per skill
and per talent. Characteristics are stored as ``initial`` + ``advances``;
Foundry derives the displayed value itself.

Failure policy:
- actor creation fails → logged, the caller falls back to a preview
- a single skill or talent item fails → logged, the rest are still added
"""

from __future__ import annotations

from typing import Any

from npcforge.config.logging import get_logger
from npcforge.generation.archetypes import is_advanced_skill
from npcforge.generation.models import Characteristic, GeneratedNPC, SkillAllocation, TalentAllocation
from npcforge.npc.models import CreateNPCRequest
from npcforge.tools.base import ToolAdapter

logger = get_logger(__name__)


def build_actor_data(request: CreateNPCRequest, npc: GeneratedNPC) -> dict[str, Any]:
    allocation = npc.allocation
    summary = allocation.summary
    biography = request.description or (
        f"{npc.archetype_name} archetype NPC generated with {request.total_xp} XP."
    )

    return {
        "name": request.name,
        "type": "character",
        "system": {
            "details": {
                "species": {"value": request.species},
                "biography": {"value": biography},
                "experience": {
                    "current": summary.remaining,
                    "total": request.total_xp,
                    "spent": summary.total_spent,
                },
            },
            "characteristics": {
                characteristic.value: {
                    "initial": allocation.characteristics[characteristic].base,
                    "advances": allocation.characteristics[characteristic].advances,
                    "modifier": 0,
                }
                for characteristic in Characteristic
            },
            "status": {
                "wounds": {"value": npc.derived.wounds, "max": npc.derived.wounds},
                "fortune": {"value": npc.derived.fortune, "max": npc.derived.fortune},
                "fate": {"value": npc.derived.fate, "max": npc.derived.fate},
            },
        },
    }


def build_skill_item(skill: SkillAllocation) -> dict[str, Any]:
    return {
        "name": skill.name,
        "type": "skill",
        "system": {
            "advanced": {"value": "adv" if is_advanced_skill(skill.name) else "bsc"},
            "grouped": {"value": "noSpec"},
            "characteristic": {"value": skill.characteristic.value},
            "advances": {"value": skill.advances, "costModifier": 0, "force": False},
            "modifier": {"value": 0},
            "total": {"value": skill.total},
        },
    }


def build_talent_item(talent: TalentAllocation) -> dict[str, Any]:
    return {
        "name": talent.name,
        "type": "talent",
        "system": {
            "max": {"value": "none"},
            "advances": {"value": talent.rank, "force": False},
            "tests": {"value": talent.description},
        },
    }


class FoundryNPCWriter:
    """
    Create actors and their items through a Foundry bridge adapter.

    Args:
        adapter: Initialized tool adapter connected to the bridge
        query_prefix: Namespace of the bridge's query handlers
    """

    def __init__(self, adapter: ToolAdapter, query_prefix: str = "foundry-mcp-bridge"):
        self._adapter = adapter
        self._query_prefix = query_prefix

    def _query(self, name: str) -> str:
        return f"{self._query_prefix}.{name}"

    async def create(self, request: CreateNPCRequest, npc: GeneratedNPC) -> str | None:
        """
        Create the actor and its items.

        Returns:
            The new actor's id, or None if the actor could not be created
        """
        try:
            actor = await self._adapter.call(
                self._query("createActor"),
                {"actorData": build_actor_data(request, npc)},
            )
        except Exception as e:
            logger.error(f"Failed to create NPC {request.name!r} in Foundry: {e}", exc_info=True)
            return None

        actor_id = actor.get("id")
        if not actor_id:
            logger.error(f"Foundry returned no actor id for {request.name!r}: {actor!r}")
            return None
        logger.info(f"Created NPC actor {actor_id} ({request.name})")

        items = [build_skill_item(s) for s in npc.allocation.skills]
        items += [build_talent_item(t) for t in npc.allocation.talents]
        added = 0
        for item in items:
            try:
                await self._adapter.call(
                    self._query("createItem"),
                    {"actorId": actor_id, "itemData": item},
                )
                added += 1
            except Exception as e:
                logger.warning(f"Failed to add {item['type']} {item['name']!r} to {actor_id}: {e}")

        logger.info(f"Completed NPC creation for {actor_id}: {added}/{len(items)} items added")
        return actor_id
