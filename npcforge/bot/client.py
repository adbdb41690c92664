"""
NPCForgeBot — discord.py bot client.

Manages the full bot lifecycle:
- Builds the NPC tool service once at startup (with the Foundry bridge if configured)
- Loads the NPC command cog
- Syncs slash commands (guild-local for dev, global for production)
- Cleans up the bridge process on shutdown via AsyncExitStack
"""

from __future__ import annotations

import discord
from contextlib import AsyncExitStack

from discord.ext import commands

from npcforge.config.logging import get_logger
from npcforge.config.settings import Settings
from npcforge.npc.service import NPCToolService, open_service

logger = get_logger(__name__)


class NPCForgeBot(commands.Bot):
    """
    Discord bot for generating WFRP 4e NPCs.

    Holds the shared NPCToolService and exposes it to cogs. The Foundry
    bridge is managed via AsyncExitStack so it's properly shut down when
    the bot closes.

    Args:
        settings: Full application settings (bot token, Foundry bridge, generator tuning)
    """

    def __init__(self, settings: Settings) -> None:
        intents = discord.Intents.default()
        super().__init__(
            command_prefix=settings.bot.command_prefix,
            intents=intents,
        )
        self.settings = settings
        self.npc_service: NPCToolService | None = None
        self._exit_stack = AsyncExitStack()

    async def setup_hook(self) -> None:
        """
        Called after login, before connecting to the Gateway.

        Builds the NPC service, loads cogs, and syncs slash commands.
        """
        # --- 1. NPC service (Foundry bridge optional; without it NPCs are previews) ---
        try:
            self.npc_service = await self._exit_stack.enter_async_context(open_service(self.settings))
        except (ValueError, FileNotFoundError) as e:
            logger.warning(f"Foundry bridge unavailable ({e}); NPCs will be previews only")
            self.npc_service = await self._exit_stack.enter_async_context(
                open_service(self.settings, connect_foundry=False)
            )
        logger.info("NPC service ready")

        # --- 2. Load cogs ---
        from npcforge.bot.cogs.npc import NPCCog
        await self.add_cog(NPCCog(self))
        logger.info("Cogs loaded")

        # --- 3. Sync slash commands ---
        try:
            if self.settings.bot.dev_guild_id:
                guild = discord.Object(id=self.settings.bot.dev_guild_id)
                self.tree.copy_global_to(guild=guild)
                await self.tree.sync(guild=guild)
                logger.info(f"Slash commands synced to dev guild {self.settings.bot.dev_guild_id} (instant)")
            else:
                await self.tree.sync()
                logger.info("Slash commands synced globally (may take up to 1 hour to propagate)")
        except discord.errors.Forbidden:
            logger.warning(
                "Could not sync slash commands (403 Forbidden). "
                "The bot is missing the 'applications.commands' OAuth2 scope. "
                "Re-invite the bot using an OAuth2 URL that includes both 'bot' "
                "and 'applications.commands' scopes."
            )
        except Exception as e:
            logger.warning(f"Slash command sync failed: {e}. The bot will still start.")

    async def on_ready(self) -> None:
        """Called when the bot successfully connects to Discord."""
        logger.info(f"Logged in as {self.user} (id: {self.user.id})")
        logger.info(f"Connected to {len(self.guilds)} guild(s)")

    async def close(self) -> None:
        """Graceful shutdown — stop the Foundry bridge before disconnecting."""
        logger.info("Shutting down NPCForge...")
        await self._exit_stack.aclose()
        await super().close()

    def is_allowed_channel(self, channel_id: int) -> bool:
        """
        Return True if the bot should respond in this channel.

        If `allowed_channel_ids` is empty (the default), the bot responds everywhere.
        If it's non-empty, the bot only responds in the listed channel IDs.
        """
        allowed = self.settings.bot.allowed_channel_ids
        return not allowed or channel_id in allowed
