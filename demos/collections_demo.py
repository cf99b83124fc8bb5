"""
Collections demo: list, create and delete collections in the demo database.

Each collection is created with its own provisioned throughput and
partition key path.
"""

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient

import click

from demos.store import get_demo_database
from demos.view import heading, view_resource
from shared.cosmos_config import (
    DEFAULT_PARTITION_KEY,
    DEFAULT_THROUGHPUT,
    DEMO_DATABASE_ID,
    get_demo_collection_id,
)


async def run(client: CosmosClient) -> None:
    await view_collections(client)

    await create_collection(client, get_demo_collection_id("collection1"))
    await create_collection(client, get_demo_collection_id("collection2"), 25000)
    await view_collections(client)

    await delete_collection(client, get_demo_collection_id("collection1"))
    await delete_collection(client, get_demo_collection_id("collection2"))


async def view_collections(client: CosmosClient) -> None:
    heading(f"View Collections in {DEMO_DATABASE_ID}")

    database = await get_demo_database(client)
    count = 0
    async for collection in database.list_containers():
        count += 1
        click.echo()
        click.echo(f" Collection #{count}")
        view_resource("Collection", collection)

    click.echo()
    click.echo(f"Total collections in {DEMO_DATABASE_ID} database: {count}")


async def create_collection(
    client: CosmosClient,
    collection_id: str,
    reserved_rus: int = DEFAULT_THROUGHPUT,
    partition_key: str = DEFAULT_PARTITION_KEY,
) -> None:
    heading(f"Create Collection {collection_id} in {DEMO_DATABASE_ID}")
    click.echo()
    click.echo(f" Throughput: {reserved_rus} RU/sec")
    click.echo(f" Partition key: {partition_key}")
    click.echo()

    database = await get_demo_database(client)
    container = await database.create_container(
        id=collection_id,
        partition_key=PartitionKey(path=partition_key),
        offer_throughput=reserved_rus,
    )
    collection = await container.read()

    click.echo("Created new collection")
    view_resource("Collection", collection)


async def delete_collection(client: CosmosClient, collection_id: str) -> None:
    heading(f"Delete Collection {collection_id} in {DEMO_DATABASE_ID}")

    database = await get_demo_database(client)
    await database.delete_container(collection_id)

    click.echo(f"Deleted collection {collection_id} from database {DEMO_DATABASE_ID}")
