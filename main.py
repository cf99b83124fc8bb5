"""
Console entry point for the Cosmos DB SDK demos.

Loads the layered configuration, then runs the interactive demo menu until
the user quits.
"""

import asyncio
import logging

import click

from config import load_settings
from core.dispatcher import CommandDispatcher
from cosmos_client import client_factory
from demos import DEMO_COMMANDS

logger = logging.getLogger(__name__)


def configure_logging(log_level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Reduce Azure SDK logging verbosity
    logging.getLogger("azure.cosmos").setLevel(logging.WARNING)
    logging.getLogger("azure.core").setLevel(logging.WARNING)
    logging.getLogger("azure.identity").setLevel(logging.WARNING)


@click.command()
def main():
    """Interactive walkthrough of the Cosmos DB SQL API Python SDK."""
    # A missing or malformed appsettings.json aborts here
    settings = load_settings()
    configure_logging(settings.log_level)

    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Cosmos DB endpoint: {settings.cosmos_db.account.endpoint}")

    dispatcher = CommandDispatcher(DEMO_COMMANDS, client_factory(settings))
    asyncio.run(dispatcher.run())


if __name__ == "__main__":
    main()
