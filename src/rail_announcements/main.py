"""Main entry point for the rail announcements application."""

import asyncio
import logging
import sys

from pydantic import ValidationError

from rail_announcements.adapters.config import AppConfig
from rail_announcements.cli import main as cli_main


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def run() -> None:
    """Console script entry point."""
    try:
        config = AppConfig()
    except ValidationError as e:
        configure_logging("INFO")
        logging.getLogger(__name__).error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.log_level)
    sys.exit(asyncio.run(cli_main(config=config)))


if __name__ == "__main__":
    run()
