"""
Tests for NPCCog.

Covers:
- Blocked channel → ephemeral reply, service untouched
- /npc-create → green embed with the NPC sheet; invalid input → red embed
- /npc-archetypes → ephemeral embeds, every archetype delivered
- /npc-preview → blue embed
- Long reports are truncated to Discord's embed limit
"""

from __future__ import annotations

import pytest
from unittest.mock import AsyncMock, MagicMock

import discord

from npcforge.bot.cogs.npc import (
    ARCHETYPE_CHOICES,
    EMBED_DESCRIPTION_LIMIT,
    NPCCog,
    _paginate,
    _split_traits,
    _truncate,
)
from npcforge.generation.archetypes import ARCHETYPES
from npcforge.generation.generator import NPCGenerator
from npcforge.npc.service import NPCToolService


def _make_interaction(channel_id=100):
    interaction = MagicMock(spec=discord.Interaction)
    interaction.channel_id = channel_id
    interaction.user = MagicMock()
    interaction.user.display_name = "Tester"
    interaction.response = MagicMock()
    interaction.response.send_message = AsyncMock()
    interaction.response.defer = AsyncMock()
    interaction.followup = MagicMock()
    interaction.followup.send = AsyncMock()
    return interaction


def _make_bot(allowed=True, service=None):
    bot = MagicMock()
    bot.is_allowed_channel.return_value = allowed
    bot.npc_service = service or NPCToolService(NPCGenerator.from_defaults())
    return bot


class TestNPCCreate:
    @pytest.mark.asyncio
    async def test_blocked_channel_sends_ephemeral(self):
        service = MagicMock()
        service.create_custom_npc = AsyncMock()
        bot = _make_bot(allowed=False, service=service)
        cog = NPCCog(bot)
        interaction = _make_interaction()

        await cog.npc_create.callback(cog, interaction, "Gunther", 1000, "aggressive-fighter")

        interaction.response.send_message.assert_called_once()
        assert interaction.response.send_message.call_args[1].get("ephemeral") is True
        service.create_custom_npc.assert_not_called()

    @pytest.mark.asyncio
    async def test_success_sends_green_embed(self):
        cog = NPCCog(_make_bot())
        interaction = _make_interaction()

        await cog.npc_create.callback(cog, interaction, "Gunther", 1000, "aggressive-fighter")

        interaction.response.defer.assert_called_once()
        embed = interaction.followup.send.call_args[1]["embed"]
        assert embed.title == "🧙 Gunther"
        assert embed.color == discord.Color.green()
        assert "**Archetype:** Aggressive Fighter" in embed.description
        assert embed.footer.text == "Requested by Tester"

    @pytest.mark.asyncio
    async def test_arguments_forwarded(self):
        service = MagicMock()
        service.create_custom_npc = AsyncMock(return_value="sheet")
        cog = NPCCog(_make_bot(service=service))
        interaction = _make_interaction()

        await cog.npc_create.callback(
            cog, interaction, "Ilsa", 3000, "scholarly-sage",
            species="high-elf", traits="curious, aloof", preview_only=True,
        )

        arguments = service.create_custom_npc.call_args[0][0]
        assert arguments["species"] == "high-elf"
        assert arguments["personalityTraits"] == ["curious", "aloof"]
        assert arguments["createInFoundry"] is False

    @pytest.mark.asyncio
    async def test_invalid_input_sends_red_embed(self):
        cog = NPCCog(_make_bot())
        interaction = _make_interaction()

        await cog.npc_create.callback(cog, interaction, "   ", 1000, "aggressive-fighter")

        embed = interaction.followup.send.call_args[1]["embed"]
        assert embed.color == discord.Color.red()
        assert "blank" in embed.description


class TestNPCArchetypes:
    @pytest.mark.asyncio
    async def test_sends_ephemeral_embed(self):
        cog = NPCCog(_make_bot())
        interaction = _make_interaction()

        await cog.npc_archetypes.callback(cog, interaction)

        call_kwargs = interaction.response.send_message.call_args[1]
        assert call_kwargs["ephemeral"] is True
        assert len(call_kwargs["embed"].description) <= EMBED_DESCRIPTION_LIMIT

    @pytest.mark.asyncio
    async def test_every_archetype_delivered(self):
        cog = NPCCog(_make_bot())
        interaction = _make_interaction()

        await cog.npc_archetypes.callback(cog, interaction)

        embeds = [interaction.response.send_message.call_args[1]["embed"]]
        embeds += [call[1]["embed"] for call in interaction.followup.send.call_args_list]
        assert len(embeds) > 1
        assert all(call[1]["ephemeral"] is True for call in interaction.followup.send.call_args_list)
        assert all(len(embed.description) <= EMBED_DESCRIPTION_LIMIT for embed in embeds)
        assert embeds[0].title == f"⚔️ NPC Archetypes (1/{len(embeds)})"

        delivered = "\n".join(embed.description for embed in embeds)
        for archetype in ARCHETYPES:
            assert f"## {archetype.name}\n" in delivered
        assert "…" not in delivered


class TestNPCPreview:
    @pytest.mark.asyncio
    async def test_success_sends_blue_embed(self):
        cog = NPCCog(_make_bot())
        interaction = _make_interaction()

        await cog.npc_preview.callback(cog, interaction, 1000, "aggressive-fighter")

        embed = interaction.followup.send.call_args[1]["embed"]
        assert embed.color == discord.Color.blue()
        assert "- **WS**: 30 → 34 (+4, 100 XP)" in embed.description


class TestHelpers:
    def test_truncate_short_text_untouched(self):
        assert _truncate("abc") == "abc"

    def test_truncate_long_text(self):
        text = _truncate("x" * 5000)
        assert len(text) == EMBED_DESCRIPTION_LIMIT
        assert text.endswith("…")

    def test_split_traits(self):
        assert _split_traits(None) == []
        assert _split_traits("brave,, grim ") == ["brave", "grim"]

    def test_paginate_splits_at_headings(self):
        text = "intro\n## A\n" + "a" * 30 + "\n## B\n" + "b" * 30
        pages = _paginate(text, limit=50)
        assert pages == ["intro\n## A\n" + "a" * 30, "## B\n" + "b" * 30]

    def test_paginate_short_text_is_one_page(self):
        assert _paginate("intro\n## A\nbody") == ["intro\n## A\nbody"]

    def test_archetype_choices_fit_discord_limit(self):
        assert len(ARCHETYPE_CHOICES) <= 25
