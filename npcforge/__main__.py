"""
NPCForge CLI entry point.

Provides command-line interface for generating NPCs, running the MCP tool
server and running the Discord bot.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from npcforge import __version__
from npcforge.config.logging import get_logger, setup_logging
from npcforge.config.settings import Settings, load_settings
from npcforge.generation.species import SPECIES_IDS
from npcforge.npc.models import NPCToolError
from npcforge.npc.service import open_service


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="npcforge",
        description="XP-budget NPC generator for Warhammer Fantasy Roleplay 4e",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"NPCForge {__version__}",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: .env in current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level from config",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    subparsers.add_parser(
        "run",
        help="Run the Discord bot",
    )

    # Serve command
    subparsers.add_parser(
        "serve",
        help="Run the NPC tools as an MCP server over stdio",
    )

    # Config command
    subparsers.add_parser(
        "config",
        help="Show current configuration",
    )

    # Archetypes command
    subparsers.add_parser(
        "archetypes",
        help="List the NPC archetypes",
    )

    # Preview command
    preview_parser = subparsers.add_parser(
        "preview",
        help="Show how an XP budget would be spent for an archetype",
    )
    preview_parser.add_argument("xp", type=int, help="Total XP budget")
    preview_parser.add_argument("archetype", help="Archetype id, e.g. aggressive-fighter")
    preview_parser.add_argument(
        "--species",
        choices=SPECIES_IDS,
        default=None,
        help="Species (default: GENERATOR__DEFAULT_SPECIES from config)",
    )

    # Create command
    create_parser_ = subparsers.add_parser(
        "create",
        help="Generate an NPC and create it in Foundry VTT (if the bridge is configured)",
    )
    create_parser_.add_argument("name", help="Name for the NPC")
    create_parser_.add_argument("xp", type=int, help="Total XP budget")
    create_parser_.add_argument("archetype", help="Archetype id, e.g. scholarly-sage")
    create_parser_.add_argument(
        "--species",
        choices=SPECIES_IDS,
        default=None,
        help="Species (default: GENERATOR__DEFAULT_SPECIES from config)",
    )
    create_parser_.add_argument("--career", default=None, help="Override the suggested career")
    create_parser_.add_argument("--description", default=None, help="Biography text")
    create_parser_.add_argument(
        "--trait",
        dest="traits",
        action="append",
        default=[],
        help="Personality trait (repeatable)",
    )
    create_parser_.add_argument(
        "--preview-only",
        action="store_true",
        help="Render the NPC without writing it to Foundry",
    )

    return parser


def cmd_config(settings: Settings) -> int:
    """Show current configuration."""
    logger = get_logger(__name__)

    logger.info("Current Configuration:")
    logger.info("\n=== NPCForge Configuration ===\n")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log File: {settings.log_file or 'None (console only)'}")
    logger.info(f"\nBot Name: {settings.bot.name}")
    logger.info(f"Command Prefix: {settings.bot.command_prefix}")
    logger.info(f"Bot Token: {'Set' if settings.bot.token else 'Not set'}")
    logger.info(f"\nFoundry Bridge: {settings.foundry.bridge_path or 'Not configured (previews only)'}")
    logger.info(f"Foundry Bridge Command: {settings.foundry.bridge_command}")
    logger.info(f"Foundry Query Prefix: {settings.foundry.query_prefix}")
    logger.info(f"\nDefault Species: {settings.generator.default_species}")
    logger.info(f"Max Advances: {settings.generator.max_advances or 'derived from cost schedule'}")
    logger.info(f"Max XP: {settings.generator.max_xp}")

    return 0


async def cmd_archetypes(settings: Settings) -> int:
    """Print the archetype reference."""
    async with open_service(settings, connect_foundry=False) as service:
        print(await service.list_archetypes())
    return 0


async def cmd_preview(args, settings: Settings) -> int:
    """Print an XP distribution preview; nothing is written to Foundry."""
    logger = get_logger(__name__)

    try:
        async with open_service(settings, connect_foundry=False) as service:
            text = await service.calculate_distribution(
                {"totalXP": args.xp, "archetype": args.archetype, "species": args.species}
            )
    except NPCToolError as e:
        logger.error(str(e))
        return 1

    print(text)
    return 0


async def cmd_create(args, settings: Settings) -> int:
    """
    Generate an NPC and print its sheet.

    The NPC is written to Foundry only when FOUNDRY__BRIDGE_PATH is set and
    --preview-only is not given; otherwise a preview is printed.
    """
    logger = get_logger(__name__)

    arguments = {
        "name": args.name,
        "totalXP": args.xp,
        "archetype": args.archetype,
        "species": args.species,
        "career": args.career,
        "description": args.description,
        "personalityTraits": args.traits,
        "createInFoundry": not args.preview_only,
    }

    try:
        async with open_service(settings, connect_foundry=not args.preview_only) as service:
            text = await service.create_custom_npc(arguments)
    except NPCToolError as e:
        logger.error(str(e))
        return 1
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Could not start the Foundry bridge: {e}")
        return 1

    print(text)
    return 0


def cmd_serve(settings: Settings) -> int:
    """Run the MCP tool server on stdio."""
    from npcforge.server import run_server

    run_server(settings)
    return 0


def cmd_run(settings: Settings) -> int:
    """Start the Discord bot."""
    logger = get_logger(__name__)

    if not settings.bot.token:
        logger.error(
            "Discord bot token not set. Add BOT__TOKEN=<your-token> to your .env file."
        )
        return 1

    from npcforge.bot import NPCForgeBot

    bot = NPCForgeBot(settings)
    logger.info(f"Starting {settings.bot.name}...")
    # log_handler=None: disable discord.py's default logging setup and use ours
    bot.run(settings.bot.token, log_handler=None)
    return 0


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load settings
    try:
        settings = load_settings(env_file=args.env_file)
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Override log level if specified
    if args.log_level:
        settings.log_level = args.log_level

    # stdout carries the MCP protocol when serving, so logs go to stderr
    setup_logging(settings, stream=sys.stderr if args.command == "serve" else None)

    # Execute command
    if args.command == "config":
        return cmd_config(settings)
    elif args.command == "run":
        return cmd_run(settings)
    elif args.command == "serve":
        return cmd_serve(settings)
    elif args.command == "archetypes":
        return asyncio.run(cmd_archetypes(settings))
    elif args.command == "preview":
        return asyncio.run(cmd_preview(args, settings))
    elif args.command == "create":
        return asyncio.run(cmd_create(args, settings))
    else:
        # Default: show help
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
