"""
Documents demo: create, query, page, replace, upsert and delete documents
in the store collection.
"""

from typing import Any, Dict

from azure.cosmos.aio import ContainerProxy, CosmosClient

import click

from demos.models import new_customer
from demos.store import get_store_container
from demos.view import heading, view_document
from shared.cosmos_config import DEMO_DOCUMENT_TAG

DYNAMIC_DOCUMENT_ID = "demo-customer-dynamic"
MODEL_DOCUMENT_ID = "demo-customer-model"
UPSERT_DOCUMENT_ID = "demo-customer-upsert"
POSTAL_CODE = "11229"


async def run(client: CosmosClient) -> None:
    container = await get_store_container(client)

    await create_documents(container)

    await query_documents(container)
    await query_with_paging(container)

    await replace_documents(container)
    await upsert_document(container)

    await delete_documents(container)


async def create_documents(container: ContainerProxy) -> None:
    heading("Create Documents")

    # From a plain dict
    document: Dict[str, Any] = {
        "id": DYNAMIC_DOCUMENT_ID,
        "name": "New Customer 1",
        "address": {
            "addressType": "Main Office",
            "addressLine1": "123 Main Street",
            "location": {"city": "Brooklyn", "stateProvinceName": "New York"},
            "postalCode": POSTAL_CODE,
            "countryRegionName": "United States",
        },
        "demo": DEMO_DOCUMENT_TAG,
    }
    result = await container.create_item(body=document)
    click.echo(f"Created document {result['id']} from dynamic object")
    view_document(result)

    # From a typed model
    customer = new_customer(MODEL_DOCUMENT_ID, "New Customer 2", "Brooklyn", "New York", POSTAL_CODE)
    result = await container.create_item(body=customer.to_document())
    click.echo(f"Created document {result['id']} from typed object")
    view_document(result)


async def query_documents(container: ContainerProxy) -> None:
    heading("Query Documents (SQL)")

    query = "SELECT * FROM c WHERE c.demo = @demo"
    params = [{"name": "@demo", "value": DEMO_DOCUMENT_TAG}]

    count = 0
    async for document in container.query_items(query=query, parameters=params):
        count += 1
        click.echo(f" Id: {document['id']}; Name: {document['name']};")
    click.echo(f"Retrieved {count} documents with a SQL query")

    heading("Query Documents (parameterized, single partition)")

    query = "SELECT c.id, c.name, c.address.location.city FROM c WHERE c.address.location.city = @city"
    params = [{"name": "@city", "value": "Brooklyn"}]
    async for document in container.query_items(query=query, parameters=params, partition_key=POSTAL_CODE):
        click.echo(f" Id: {document['id']}; City: {document['city']};")

    heading("Read Document by id")

    document = await container.read_item(item=MODEL_DOCUMENT_ID, partition_key=POSTAL_CODE)
    view_document(document)


async def query_with_paging(container: ContainerProxy) -> None:
    heading("Query Documents (paged results)")

    query = "SELECT * FROM c"
    pages = container.query_items(query=query, max_item_count=100).by_page()

    page_number = 0
    total = 0
    async for page in pages:
        page_number += 1
        page_count = 0
        async for _ in page:
            page_count += 1
        total += page_count
        click.echo(f" Page {page_number}: {page_count} documents")
    click.echo(f"Retrieved {total} documents in {page_number} pages")


async def replace_documents(container: ContainerProxy) -> None:
    heading("Replace Documents")

    document = await container.read_item(item=DYNAMIC_DOCUMENT_ID, partition_key=POSTAL_CODE)
    document["isNew"] = True
    result = await container.replace_item(item=document["id"], body=document)
    click.echo(f"Replaced document {result['id']}; isNew = {result.get('isNew')}")


async def upsert_document(container: ContainerProxy) -> None:
    heading("Upsert Document")

    customer = new_customer(UPSERT_DOCUMENT_ID, "Upserted Customer", "Brooklyn", "New York", POSTAL_CODE)
    result = await container.upsert_item(body=customer.to_document())
    click.echo(f"Inserted document {result['id']} via upsert")

    customer.name = "Upserted Customer (updated)"
    result = await container.upsert_item(body=customer.to_document())
    click.echo(f"Updated document {result['id']} via upsert; name = {result['name']}")


async def delete_documents(container: ContainerProxy) -> None:
    heading("Delete Documents")

    for document_id in (DYNAMIC_DOCUMENT_ID, MODEL_DOCUMENT_ID, UPSERT_DOCUMENT_ID):
        await container.delete_item(item=document_id, partition_key=POSTAL_CODE)
        click.echo(f"Deleted document {document_id}")
