"""
Tests for Foundry actor payloads and FoundryNPCWriter.

Covers:
- Actor/item payload shapes
- Actor creation failure → None, no items attempted
- Item failure → logged, remaining items still added
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from npcforge.generation.generator import NPCGenerator
from npcforge.generation.models import Characteristic, SkillAllocation
from npcforge.npc.foundry import (
    FoundryNPCWriter,
    build_actor_data,
    build_skill_item,
    build_talent_item,
)
from npcforge.npc.models import CreateNPCRequest
from npcforge.tools.foundry_bridge import FoundryBridgeError


@pytest.fixture
def request_():
    return CreateNPCRequest(name="Gunther", total_xp=1000, archetype="aggressive-fighter")


@pytest.fixture
def npc():
    return NPCGenerator.from_defaults().generate(1000, "aggressive-fighter", "human")


def _make_adapter(actor_reply=None, item_side_effect=None):
    adapter = MagicMock()

    async def call(tool_name, arguments):
        if tool_name.endswith(".createActor"):
            if isinstance(actor_reply, Exception):
                raise actor_reply
            return actor_reply if actor_reply is not None else {"id": "actor-1"}
        if item_side_effect is not None:
            return item_side_effect(arguments)
        return {"id": "item"}

    adapter.call = AsyncMock(side_effect=call)
    return adapter


class TestPayloads:
    def test_actor_data(self, request_, npc):
        data = build_actor_data(request_, npc)

        assert data["name"] == "Gunther"
        assert data["type"] == "character"
        assert data["system"]["characteristics"]["ws"] == {"initial": 30, "advances": 4, "modifier": 0}
        assert data["system"]["details"]["experience"] == {"current": 100, "total": 1000, "spent": 900}
        assert data["system"]["status"]["wounds"] == {"value": 12, "max": 12}
        assert "Aggressive Fighter archetype NPC" in data["system"]["details"]["biography"]["value"]

    def test_description_becomes_biography(self, npc):
        request = CreateNPCRequest(
            name="Gunther", total_xp=1000, archetype="aggressive-fighter", description="A veteran."
        )
        assert build_actor_data(request, npc)["system"]["details"]["biography"]["value"] == "A veteran."

    def test_skill_item(self, npc):
        item = build_skill_item(npc.allocation.skills[0])
        assert item["type"] == "skill"
        assert item["name"] == "Melee (Basic)"
        assert item["system"]["characteristic"]["value"] == "ws"
        assert item["system"]["advances"]["value"] == 5
        assert item["system"]["advanced"]["value"] == "bsc"

    def test_advanced_skill_item(self):
        skill = SkillAllocation(
            name="Lore (Magic)", advances=3, total=38, xp_spent=30, characteristic=Characteristic.INT
        )
        assert build_skill_item(skill)["system"]["advanced"]["value"] == "adv"

    def test_talent_item(self, npc):
        item = build_talent_item(npc.allocation.talents[0])
        assert item["type"] == "talent"
        assert item["system"]["advances"]["value"] == 1


class TestFoundryNPCWriter:
    @pytest.mark.asyncio
    async def test_creates_actor_then_items(self, request_, npc):
        adapter = _make_adapter()
        writer = FoundryNPCWriter(adapter, query_prefix="bridge")

        actor_id = await writer.create(request_, npc)

        assert actor_id == "actor-1"
        calls = adapter.call.await_args_list
        assert calls[0].args[0] == "bridge.createActor"
        item_calls = calls[1:]
        assert len(item_calls) == len(npc.allocation.skills) + len(npc.allocation.talents)
        assert all(c.args[0] == "bridge.createItem" for c in item_calls)
        assert all(c.args[1]["actorId"] == "actor-1" for c in item_calls)

    @pytest.mark.asyncio
    async def test_actor_failure_returns_none(self, request_, npc):
        adapter = _make_adapter(actor_reply=FoundryBridgeError("boom"))

        assert await FoundryNPCWriter(adapter).create(request_, npc) is None
        assert adapter.call.await_count == 1

    @pytest.mark.asyncio
    async def test_actor_without_id_returns_none(self, request_, npc):
        adapter = _make_adapter(actor_reply={"name": "Gunther"})
        assert await FoundryNPCWriter(adapter).create(request_, npc) is None

    @pytest.mark.asyncio
    async def test_item_failure_does_not_stop_the_rest(self, request_, npc):
        def fail_first_skill(arguments):
            if arguments["itemData"]["name"] == "Melee (Basic)":
                raise FoundryBridgeError("rejected")
            return {"id": "item"}

        adapter = _make_adapter(item_side_effect=fail_first_skill)

        actor_id = await FoundryNPCWriter(adapter).create(request_, npc)

        assert actor_id == "actor-1"
        expected = 1 + len(npc.allocation.skills) + len(npc.allocation.talents)
        assert adapter.call.await_count == expected
