"""
Indexing demo: collections created with custom indexing policies.
"""

import json
from typing import Any, Dict, Optional

from azure.cosmos import PartitionKey
from azure.cosmos.aio import ContainerProxy, CosmosClient

import click

from demos.models import new_customer
from demos.store import get_demo_database
from demos.view import heading
from shared.cosmos_config import DEFAULT_THROUGHPUT, STORE_COLLECTION, get_demo_collection_id

EXCLUDED_PATH_POLICY: Dict[str, Any] = {
    "indexingMode": "consistent",
    "automatic": True,
    "includedPaths": [{"path": "/*"}],
    "excludedPaths": [{"path": "/address/*"}, {"path": '/"_etag"/?'}],
}

NO_INDEX_POLICY: Dict[str, Any] = {
    "indexingMode": "none",
    "automatic": False,
}

COMPOSITE_AND_SPATIAL_POLICY: Dict[str, Any] = {
    "indexingMode": "consistent",
    "includedPaths": [{"path": "/*"}],
    "excludedPaths": [{"path": '/"_etag"/?'}],
    "compositeIndexes": [
        [
            {"path": "/address/location/city", "order": "ascending"},
            {"path": "/name", "order": "descending"},
        ]
    ],
    "spatialIndexes": [{"path": "/geo/*", "types": ["Point"]}],
}


async def run(client: CosmosClient) -> None:
    await excluded_paths(client)
    await no_automatic_indexing(client)
    await composite_and_spatial_indexes(client)


async def excluded_paths(client: CosmosClient) -> None:
    heading("Exclude paths from indexing")

    collection_id = get_demo_collection_id("excluded_path")
    container = await _create_collection(client, collection_id, EXCLUDED_PATH_POLICY)

    await container.create_item(
        body=new_customer("indexed-1", "Indexed Customer", "Dallas", "Texas", "75201").to_document()
    )

    # Filter on an indexed property
    await _run_query(container, "SELECT * FROM c WHERE c.name = 'Indexed Customer'")

    # Filter on an excluded path falls back to a scan
    await _run_query(
        container,
        "SELECT * FROM c WHERE c.address.location.city = 'Dallas'",
        partition_key="75201",
    )

    await _delete_collection(client, collection_id)


async def no_automatic_indexing(client: CosmosClient) -> None:
    heading("No automatic indexing")

    collection_id = get_demo_collection_id("no_index")
    container = await _create_collection(client, collection_id, NO_INDEX_POLICY)

    await container.create_item(
        body=new_customer("unindexed-1", "Unindexed Customer", "Austin", "Texas", "73301").to_document()
    )

    # Point reads still work without an index
    document = await container.read_item(item="unindexed-1", partition_key="73301")
    click.echo(f"Read document {document['id']} by id and partition key")

    await _delete_collection(client, collection_id)


async def composite_and_spatial_indexes(client: CosmosClient) -> None:
    heading("Composite and spatial indexes")

    collection_id = get_demo_collection_id("composite")
    container = await _create_collection(client, collection_id, COMPOSITE_AND_SPATIAL_POLICY)

    for index, (city, postal_code) in enumerate([("Seattle", "98101"), ("Redmond", "98052")], start=1):
        document = new_customer(f"geo-{index}", f"Customer {index}", city, "Washington", postal_code).to_document()
        document["geo"] = {"type": "Point", "coordinates": [-122.3 + index / 10, 47.6]}
        await container.create_item(body=document)

    # ORDER BY on two properties requires the composite index
    await _run_query(
        container,
        "SELECT c.id, c.name FROM c ORDER BY c.address.location.city ASC, c.name DESC",
    )

    await _run_query(
        container,
        "SELECT c.id FROM c WHERE ST_DISTANCE(c.geo, {'type': 'Point', 'coordinates': [-122.3, 47.6]}) < 30000",
    )

    await _delete_collection(client, collection_id)


async def _create_collection(
    client: CosmosClient, collection_id: str, policy: Dict[str, Any]
) -> ContainerProxy:
    database = await get_demo_database(client)
    container = await database.create_container(
        id=collection_id,
        partition_key=PartitionKey(path=STORE_COLLECTION[1]),
        indexing_policy=policy,
        offer_throughput=DEFAULT_THROUGHPUT,
    )
    properties = await container.read()

    click.echo(f"Created collection {collection_id} with indexing policy:")
    click.echo(json.dumps(properties.get("indexingPolicy", policy), indent=2))
    return container


async def _run_query(container: ContainerProxy, query: str, partition_key: Optional[str] = None) -> None:
    click.echo()
    click.echo(f"Query: {query}")

    kwargs = {"partition_key": partition_key} if partition_key is not None else {}
    count = 0
    async for document in container.query_items(query=query, **kwargs):
        count += 1
        click.echo(f" {document.get('id')}")
    click.echo(f"Returned {count} documents")


async def _delete_collection(client: CosmosClient, collection_id: str) -> None:
    database = await get_demo_database(client)
    await database.delete_container(collection_id)
    click.echo()
    click.echo(f"Deleted collection {collection_id}")
