"""
Azure Cosmos DB Client Factory.
Provides a scoped async CosmosClient, authenticated with the account key or,
when no key is configured, with DefaultAzureCredential.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, AsyncContextManager

from azure.cosmos.aio import CosmosClient
from azure.identity.aio import DefaultAzureCredential

from config import Settings

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], AsyncContextManager[CosmosClient]]


@asynccontextmanager
async def open_client(settings: Settings) -> AsyncIterator[CosmosClient]:
    """
    Open a CosmosClient for the duration of one demo.

    The client connects to the account on entry and is closed on exit,
    whether or not the demo succeeded.
    """
    account = settings.cosmos_db.account
    endpoint = account.endpoint

    credential = None
    if account.master_key:
        logger.info(f"Opening Cosmos DB client with account key: {endpoint}")
        client = CosmosClient(endpoint, credential=account.master_key)
    else:
        # No key configured: managed identity, Azure CLI, environment credentials
        logger.info(f"Opening Cosmos DB client with DefaultAzureCredential: {endpoint}")
        credential = DefaultAzureCredential()
        client = CosmosClient(endpoint, credential=credential)

    try:
        # __aexit__ is skipped when connecting fails, so close explicitly
        async with client:
            yield client
    finally:
        try:
            await client.close()
        finally:
            if credential is not None:
                await credential.close()


def client_factory(settings: Settings) -> ClientFactory:
    """Bind the settings so the dispatcher can open a fresh client per demo."""

    def factory() -> AsyncContextManager[CosmosClient]:
        return open_client(settings)

    return factory
