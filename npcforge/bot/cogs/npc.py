"""
NPCCog — NPC generation slash commands.

    /npc-create      generate an NPC (written to Foundry if the bridge is configured)
    /npc-archetypes  list the archetypes
    /npc-preview     show how an XP budget would be spent

All three route to the bot's shared NPCToolService. Invalid input is
reported in a red embed; the archetype list is sent ephemerally because it
is long and only useful to the person asking, and is split across several
embeds at archetype boundaries to stay within Discord's description limit.
"""

from __future__ import annotations

import re

import discord
from discord import app_commands
from discord.ext import commands

from npcforge.config.logging import get_logger
from npcforge.generation.archetypes import ARCHETYPES
from npcforge.generation.species import SPECIES
from npcforge.npc.models import NPCToolError

logger = get_logger(__name__)

# Discord's limit for an embed description
EMBED_DESCRIPTION_LIMIT = 4096

ARCHETYPE_CHOICES = [app_commands.Choice(name=a.name, value=a.id) for a in ARCHETYPES]
SPECIES_CHOICES = [app_commands.Choice(name=s.name, value=s.id) for s in SPECIES]


def _truncate(text: str, limit: int = EMBED_DESCRIPTION_LIMIT) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"


def _paginate(text: str, limit: int = EMBED_DESCRIPTION_LIMIT) -> list[str]:
    """Split markdown at ``## `` headings into pages no longer than limit."""
    pages: list[str] = []
    current = ""
    for section in re.split(r"\n(?=## )", text):
        candidate = f"{current}\n{section}" if current else section
        if len(candidate) <= limit:
            current = candidate
            continue
        if current:
            pages.append(current)
        current = _truncate(section, limit)
    if current:
        pages.append(current)
    return pages


def _split_traits(traits: str | None) -> list[str]:
    if not traits:
        return []
    return [trait.strip() for trait in traits.split(",") if trait.strip()]


class NPCCog(commands.Cog):
    """Provides the /npc-* slash commands."""

    def __init__(self, bot) -> None:
        self.bot = bot

    async def _check_channel(self, interaction: discord.Interaction) -> bool:
        if self.bot.is_allowed_channel(interaction.channel_id):
            return True
        await interaction.response.send_message(
            "I'm not configured to respond in this channel.", ephemeral=True
        )
        return False

    async def _send_error(self, interaction: discord.Interaction, message: str) -> None:
        embed = discord.Embed(
            title="❌ Could not generate NPC",
            description=_truncate(message),
            color=discord.Color.red(),
        )
        await interaction.followup.send(embed=embed)

    @app_commands.command(name="npc-create", description="Generate a WFRP 4e NPC from an XP budget")
    @app_commands.describe(
        name="Name for the NPC",
        xp="Total XP budget (500-1000 novice, 4000+ master)",
        archetype="Archetype that decides where the XP goes",
        species="Species (default: human)",
        career="Career to show instead of the suggested one",
        description="Short biography",
        traits="Comma-separated personality traits",
        preview_only="Render the NPC without writing it to Foundry",
    )
    @app_commands.choices(archetype=ARCHETYPE_CHOICES, species=SPECIES_CHOICES)
    async def npc_create(
        self,
        interaction: discord.Interaction,
        name: str,
        xp: app_commands.Range[int, 0, 10000],
        archetype: str,
        species: str | None = None,
        career: str | None = None,
        description: str | None = None,
        traits: str | None = None,
        preview_only: bool = False,
    ) -> None:
        """
        /npc-create name:<name> xp:<budget> archetype:<archetype>

        Examples:
          /npc-create name:Gunther xp:1200 archetype:aggressive-fighter
          /npc-create name:Ilsa xp:3000 archetype:scholarly-sage species:high-elf traits:curious,aloof
        """
        if not await self._check_channel(interaction):
            return

        await interaction.response.defer()

        arguments = {
            "name": name,
            "totalXP": xp,
            "archetype": archetype,
            "species": species,
            "career": career,
            "description": description,
            "personalityTraits": _split_traits(traits),
            "createInFoundry": not preview_only,
        }

        try:
            text = await self.bot.npc_service.create_custom_npc(arguments)
        except NPCToolError as e:
            logger.warning(f"/npc-create rejected for {name!r}: {e}")
            await self._send_error(interaction, str(e))
            return

        embed = discord.Embed(
            title=f"🧙 {name}",
            description=_truncate(text),
            color=discord.Color.green(),
        )
        embed.set_footer(text=f"Requested by {interaction.user.display_name}")
        await interaction.followup.send(embed=embed)

    @app_commands.command(name="npc-archetypes", description="List the NPC archetypes")
    async def npc_archetypes(self, interaction: discord.Interaction) -> None:
        """/npc-archetypes"""
        if not await self._check_channel(interaction):
            return

        text = await self.bot.npc_service.list_archetypes()
        pages = _paginate(text)
        for number, page in enumerate(pages, start=1):
            title = "⚔️ NPC Archetypes" if len(pages) == 1 else f"⚔️ NPC Archetypes ({number}/{len(pages)})"
            embed = discord.Embed(title=title, description=page, color=discord.Color.blurple())
            # Discord allows one initial response; later pages go out as follow-ups
            if number == 1:
                await interaction.response.send_message(embed=embed, ephemeral=True)
            else:
                await interaction.followup.send(embed=embed, ephemeral=True)

    @app_commands.command(name="npc-preview", description="Preview how an XP budget would be spent")
    @app_commands.describe(
        xp="Total XP budget",
        archetype="Archetype that decides where the XP goes",
        species="Species (default: human)",
    )
    @app_commands.choices(archetype=ARCHETYPE_CHOICES, species=SPECIES_CHOICES)
    async def npc_preview(
        self,
        interaction: discord.Interaction,
        xp: app_commands.Range[int, 0, 10000],
        archetype: str,
        species: str | None = None,
    ) -> None:
        """/npc-preview xp:<budget> archetype:<archetype>"""
        if not await self._check_channel(interaction):
            return

        await interaction.response.defer()

        try:
            text = await self.bot.npc_service.calculate_distribution(
                {"totalXP": xp, "archetype": archetype, "species": species}
            )
        except NPCToolError as e:
            logger.warning(f"/npc-preview rejected: {e}")
            await self._send_error(interaction, str(e))
            return

        embed = discord.Embed(
            title=f"📊 {xp} XP",
            description=_truncate(text),
            color=discord.Color.blue(),
        )
        await interaction.followup.send(embed=embed)
