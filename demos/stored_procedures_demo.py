"""
Stored procedures demo: register, list, execute and delete stored procedures
on the store collection.
"""

from typing import Any, Dict, List

from azure.cosmos.aio import ContainerProxy, CosmosClient

import click

from demos.models import new_customer
from demos.server_scripts import STORED_PROCEDURES
from demos.store import get_store_container
from demos.view import heading, view_document, view_resource

POSTAL_CODE = "60603"
BULK_DOCUMENT_COUNT = 20


async def run(client: CosmosClient) -> None:
    container = await get_store_container(client)

    await create_stored_procedures(container)
    await view_stored_procedures(container)

    await execute_hello_world(container)
    await execute_set_north_america(container)
    await execute_ensure_unique_id(container)
    await execute_bulk_insert(container)
    await execute_bulk_delete(container)

    await delete_stored_procedures(container)


async def create_stored_procedures(container: ContainerProxy) -> None:
    heading("Create Stored Procedures")

    for sproc_id, body in STORED_PROCEDURES.items():
        result = await container.scripts.create_stored_procedure(body={"id": sproc_id, "body": body})
        click.echo(f"Created stored procedure {result['id']} ({result['_rid']})")


async def view_stored_procedures(container: ContainerProxy) -> None:
    heading(f"View Stored Procedures in {container.id}")

    count = 0
    async for sproc in container.scripts.list_stored_procedures():
        count += 1
        click.echo()
        click.echo(f" Stored procedure #{count}")
        view_resource("Stored procedure", sproc)

    click.echo()
    click.echo(f"Total stored procedures: {count}")


async def execute_hello_world(container: ContainerProxy) -> None:
    heading("Execute spHelloWorld stored procedure")

    result = await container.scripts.execute_stored_procedure(
        sproc="spHelloWorld",
        partition_key=POSTAL_CODE,
    )
    click.echo(f"Result: {result}")


async def execute_set_north_america(container: ContainerProxy) -> None:
    heading("Execute spSetNorthAmerica (country = United States)")

    document = new_customer("sproc-na-1", "Chicago Customer", "Chicago", "Illinois", POSTAL_CODE).to_document()
    result = await container.scripts.execute_stored_procedure(
        sproc="spSetNorthAmerica",
        partition_key=POSTAL_CODE,
        parameters=[document, True],
    )
    click.echo(f"Result: isNorthAmerica = {result['address']['isNorthAmerica']}")
    view_document(result)

    await container.delete_item(item=result["id"], partition_key=POSTAL_CODE)


async def execute_ensure_unique_id(container: ContainerProxy) -> None:
    heading("Execute spEnsureUniqueId")

    created: List[str] = []
    for _ in range(3):
        document = new_customer("sproc-unique", "Unique Customer", "Chicago", "Illinois", POSTAL_CODE).to_document()
        result = await container.scripts.execute_stored_procedure(
            sproc="spEnsureUniqueId",
            partition_key=POSTAL_CODE,
            parameters=[document],
        )
        created.append(result["id"])
        click.echo(f"New document id: {result['id']}")

    for document_id in created:
        await container.delete_item(item=document_id, partition_key=POSTAL_CODE)


async def execute_bulk_insert(container: ContainerProxy) -> None:
    heading("Execute spBulkInsert")

    docs: List[Dict[str, Any]] = [
        new_customer(f"bulk-{index}", f"Bulk Customer {index}", "Chicago", "Illinois", POSTAL_CODE).to_document()
        for index in range(1, BULK_DOCUMENT_COUNT + 1)
    ]

    # The procedure stops early when it runs out of time; resume from where it left off
    total_inserted = 0
    while total_inserted < len(docs):
        inserted = await container.scripts.execute_stored_procedure(
            sproc="spBulkInsert",
            partition_key=POSTAL_CODE,
            parameters=[docs[total_inserted:]],
        )
        if inserted == 0:
            raise RuntimeError(
                f"spBulkInsert inserted no documents; {len(docs) - total_inserted} remaining"
            )
        total_inserted += inserted
        click.echo(f"Inserted {inserted} documents ({total_inserted} total, {len(docs) - total_inserted} remaining)")


async def execute_bulk_delete(container: ContainerProxy) -> None:
    heading("Execute spBulkDelete")

    sql = "SELECT c._self FROM c WHERE STARTSWITH(c.id, 'bulk-')"

    total_deleted = 0
    continuation = True
    while continuation:
        result = await container.scripts.execute_stored_procedure(
            sproc="spBulkDelete",
            partition_key=POSTAL_CODE,
            parameters=[sql],
        )
        total_deleted += result["deleted"]
        continuation = result["continuation"]
        click.echo(f"Deleted {result['deleted']} documents ({total_deleted} total)")


async def delete_stored_procedures(container: ContainerProxy) -> None:
    heading("Delete Stored Procedures")

    for sproc_id in STORED_PROCEDURES:
        await container.scripts.delete_stored_procedure(sproc=sproc_id)
        click.echo(f"Deleted stored procedure {sproc_id}")
