"""
Logging configuration and setup.

Console output is colourised by level; a plain-text file handler is added
when ``log_file`` is configured. Every module logs under the ``npcforge``
namespace via get_logger().
"""

import logging
import sys
from pathlib import Path

from npcforge.config.settings import Settings


class ColoredFormatter(logging.Formatter):
    """Formatter that adds color to console output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color."""
        if record.levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
            )
        return super().format(record)


def setup_logging(settings: Settings, stream=None) -> None:
    """
    Configure the ``npcforge`` logger from settings.

    Args:
        settings: Application settings containing log configuration
        stream: Console stream (default: stdout). The MCP stdio server passes
                stderr here because stdout carries the protocol.
    """
    package_logger = logging.getLogger("npcforge")
    level = getattr(logging, settings.log_level)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        ColoredFormatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    package_logger.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        package_logger.addHandler(file_handler)

    package_logger.propagate = False

    package_logger.info(f"Logging initialized - Level: {settings.log_level}")
    if settings.log_file:
        package_logger.info(f"Logging to file: {settings.log_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Module names that already carry the package prefix are used as-is, so
    ``get_logger(__name__)`` never yields ``npcforge.npcforge.*``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    if name == "npcforge" or name.startswith("npcforge."):
        return logging.getLogger(name)
    return logging.getLogger(f"npcforge.{name}")
