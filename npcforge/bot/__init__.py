"""
Discord Bot Layer.

Exposes the NPC tools as slash commands and formats their markdown output
as embeds for the NPCForge bot.
"""

from npcforge.bot.client import NPCForgeBot

__all__ = ["NPCForgeBot"]
