"""
Application settings and configuration management.

Uses Pydantic Settings for validation and environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BotSettings(BaseSettings):
    """Discord bot configuration."""

    name: str = Field(default="NPCForge", description="Bot display name")
    command_prefix: str = Field(default="!", description="Command prefix for bot commands")
    token: str = Field(default="", description="Discord bot token")
    allowed_channel_ids: list[int] = Field(
        default_factory=list,
        description="If non-empty, bot only responds in these channel IDs. "
                    "Set via BOT__ALLOWED_CHANNEL_IDS='[123456,789012]'",
    )
    dev_guild_id: int | None = Field(
        default=None,
        description="If set, syncs slash commands to this guild instantly (dev mode). "
                    "If None, syncs globally (up to 1 hour propagation).",
    )


class FoundrySettings(BaseSettings):
    """Foundry VTT bridge configuration."""

    bridge_command: str = Field(
        default="node",
        description="Executable used to launch the Foundry bridge process",
    )
    bridge_path: str | None = Field(
        default=None,
        description="Path to the Foundry bridge entry script. "
                    "If unset, NPCs are rendered as previews and never written to Foundry.",
    )
    query_prefix: str = Field(
        default="foundry-mcp-bridge",
        description="Namespace of the bridge query handlers, e.g. '<prefix>.createActor'",
    )

    model_config = SettingsConfigDict(env_prefix="FOUNDRY_")


class GeneratorSettings(BaseSettings):
    """NPC generator tuning."""

    default_species: Literal["human", "halfling", "dwarf", "high-elf", "wood-elf"] = Field(
        default="human", description="Species used when a request does not name one"
    )
    max_advances: int | None = Field(
        default=None,
        ge=1,
        description="Hard ceiling on advances bought for a single characteristic or skill. "
                    "None derives the ceiling from the cost schedule's length.",
    )
    max_xp: int = Field(default=10000, ge=0, description="Largest XP budget accepted by the tools")

    model_config = SettingsConfigDict(env_prefix="GENERATOR_")


class Settings(BaseSettings):
    """Main application settings."""

    # Environment
    environment: Literal["development", "production"] = Field(
        default="development", description="Deployment environment"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_file: Path | None = Field(default=None, description="Log file path")

    # Sub-configurations
    bot: BotSettings = Field(default_factory=BotSettings)
    foundry: FoundrySettings = Field(default_factory=FoundrySettings)
    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from file and environment.

    Args:
        env_file: Path to .env file (optional)

    Returns:
        Loaded settings instance
    """
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
