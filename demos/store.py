"""
Access to the demo database and the long-lived store collection.
"""

from azure.cosmos import PartitionKey
from azure.cosmos.aio import ContainerProxy, CosmosClient, DatabaseProxy

from shared.cosmos_config import DEFAULT_THROUGHPUT, DEMO_DATABASE_ID, STORE_COLLECTION


async def get_demo_database(client: CosmosClient) -> DatabaseProxy:
    """Get the demo database, creating it on first use."""
    return await client.create_database_if_not_exists(id=DEMO_DATABASE_ID)


async def get_store_container(client: CosmosClient) -> ContainerProxy:
    """Get the store collection, creating it on first use."""
    collection_id, partition_key = STORE_COLLECTION
    database = await get_demo_database(client)
    return await database.create_container_if_not_exists(
        id=collection_id,
        partition_key=PartitionKey(path=partition_key),
        offer_throughput=DEFAULT_THROUGHPUT,
    )
