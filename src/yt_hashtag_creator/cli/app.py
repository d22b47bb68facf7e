"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from dotenv import load_dotenv

from ..config import get_settings

# Load environment variables from .env file
load_dotenv()

# Loggers owned by this package
_PACKAGE_LOGGERS = ["hashtag_creator", "rpc_server"]

# Create Typer app
app = typer.Typer(
    name="ythashtags",
    help="Ranked YouTube hashtags for video discovery",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands."""
    from .commands import create, niches, serve, tools

    app.command(name="create")(create)
    app.command(name="tools")(tools)
    app.command(name="niches")(niches)
    app.command(name="serve")(serve)


def setup_logging(level: str = "INFO", log_dir: Path | None = None) -> None:
    """Configure logging for CLI.

    - Suppresses console output so stdout stays usable for JSON and RPC
    - Writes package logs to log_dir/hashtags.log when log_dir is given
    """
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)  # Suppress root logger output

    handler: logging.Handler
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_dir / "hashtags.log", encoding="utf-8")
    else:
        handler = logging.NullHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )

    for name in _PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level.upper())
        logger.propagate = False
        logger.handlers = [handler]


@app.callback()
def _configure() -> None:
    """Ranked YouTube hashtags for video discovery."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir if settings.log_to_file else None)


# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    app()
