"""
Cleanup: remove everything the demos can leave behind when they fail partway.

Resources that are already gone are reported and skipped.
"""

import logging
from typing import Awaitable

from azure.cosmos.aio import ContainerProxy, CosmosClient, DatabaseProxy
from azure.cosmos.exceptions import CosmosResourceNotFoundError

import click

from demos.server_scripts import STORED_PROCEDURES, TRIGGERS, USER_DEFINED_FUNCTIONS
from demos.view import heading
from shared.cosmos_config import (
    DEMO_COLLECTIONS,
    DEMO_DATABASE_ID,
    DEMO_DOCUMENT_TAG,
    DEMO_USERS,
    NEW_DATABASE_ID,
    STORE_COLLECTION,
)

logger = logging.getLogger(__name__)


async def run(client: CosmosClient) -> None:
    database = client.get_database_client(DEMO_DATABASE_ID)
    container = database.get_container_client(STORE_COLLECTION[0])

    heading("Cleanup")

    await _delete(f"database {NEW_DATABASE_ID}", client.delete_database(NEW_DATABASE_ID))

    for collection_id in DEMO_COLLECTIONS.values():
        await _delete(f"collection {collection_id}", database.delete_container(collection_id))

    for user_id in DEMO_USERS:
        await _delete(f"user {user_id}", database.delete_user(user_id))

    for sproc_id in STORED_PROCEDURES:
        await _delete(f"stored procedure {sproc_id}", container.scripts.delete_stored_procedure(sproc=sproc_id))
    for trigger_id in TRIGGERS:
        await _delete(f"trigger {trigger_id}", container.scripts.delete_trigger(trigger=trigger_id))
    for udf_id in USER_DEFINED_FUNCTIONS:
        await _delete(f"user defined function {udf_id}", container.scripts.delete_user_defined_function(udf=udf_id))

    await delete_demo_documents(database, container)


async def delete_demo_documents(database: DatabaseProxy, container: ContainerProxy) -> None:
    query = "SELECT c.id, c.address.postalCode FROM c WHERE c.demo = @demo"
    params = [{"name": "@demo", "value": DEMO_DOCUMENT_TAG}]

    try:
        documents = [document async for document in container.query_items(query=query, parameters=params)]
    except CosmosResourceNotFoundError:
        click.echo(f" collection {database.id}/{container.id}: not found")
        return

    for document in documents:
        await _delete(
            f"document {document['id']}",
            container.delete_item(item=document["id"], partition_key=document.get("postalCode")),
        )
    click.echo(f"Deleted {len(documents)} demo documents")


async def _delete(description: str, operation: Awaitable) -> bool:
    try:
        await operation
    except CosmosResourceNotFoundError:
        logger.debug(f"{description} does not exist")
        click.echo(f" {description}: not found")
        return False
    click.echo(f" {description}: deleted")
    return True
