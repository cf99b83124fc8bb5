"""
Triggers demo: pre- and post-triggers that run when documents are created.
"""

from azure.cosmos.aio import ContainerProxy, CosmosClient
from azure.cosmos.exceptions import CosmosHttpResponseError

import click

from core.dispatcher import format_error_chain
from demos.models import new_customer
from demos.server_scripts import TRIGGERS
from demos.store import get_store_container
from demos.view import heading, view_document, view_resource
from shared.cosmos_config import DEMO_DOCUMENT_TAG

POSTAL_CODE = "02108"
METADATA_DOCUMENT_ID = f"_metadata_{POSTAL_CODE}"


async def run(client: CosmosClient) -> None:
    container = await get_store_container(client)

    await create_triggers(container)
    await view_triggers(container)

    await execute_triggers(container)
    await execute_rejecting_trigger(container)

    await delete_triggers(container)


async def create_triggers(container: ContainerProxy) -> None:
    heading("Create Triggers")

    for trigger_id, (body, trigger_type, operation) in TRIGGERS.items():
        result = await container.scripts.create_trigger(
            body={
                "id": trigger_id,
                "body": body,
                "triggerType": trigger_type,
                "triggerOperation": operation,
            }
        )
        click.echo(f"Created {trigger_type.lower()}-trigger {result['id']} on {operation.lower()}")


async def view_triggers(container: ContainerProxy) -> None:
    heading(f"View Triggers in {container.id}")

    count = 0
    async for trigger in container.scripts.list_triggers():
        count += 1
        click.echo()
        click.echo(f" Trigger #{count}")
        view_resource("Trigger", trigger)

    click.echo()
    click.echo(f"Total triggers: {count}")


async def execute_triggers(container: ContainerProxy) -> None:
    heading("Create Documents with pre- and post-triggers")

    document_ids = ["trigger-1", "trigger-2"]
    for document_id in document_ids:
        document = new_customer(document_id, "  Boston Customer  ", "Boston", "Massachusetts", POSTAL_CODE)
        result = await container.create_item(
            body=document.to_document(),
            pre_trigger_include="trgValidateDocument",
            post_trigger_include="trgUpdateMetadata",
        )
        click.echo(f"Created document {result['id']}; name = '{result['name']}'; validated at {result.get('validatedAt')}")

    metadata = await container.read_item(item=METADATA_DOCUMENT_ID, partition_key=POSTAL_CODE)
    click.echo("Metadata document maintained by the post-trigger:")
    view_document(metadata)

    for document_id in document_ids + [METADATA_DOCUMENT_ID]:
        await container.delete_item(item=document_id, partition_key=POSTAL_CODE)


async def execute_rejecting_trigger(container: ContainerProxy) -> None:
    heading("Create an invalid Document with a pre-trigger")

    document = {"id": "trigger-invalid", "demo": DEMO_DOCUMENT_TAG, "address": {"postalCode": POSTAL_CODE}}
    try:
        await container.create_item(body=document, pre_trigger_include="trgValidateDocument")
    except CosmosHttpResponseError as ex:
        click.echo("Document was rejected by the trigger:")
        click.echo(format_error_chain(ex))
    else:
        await container.delete_item(item=document["id"], partition_key=POSTAL_CODE)
        click.echo("Document was unexpectedly accepted")


async def delete_triggers(container: ContainerProxy) -> None:
    heading("Delete Triggers")

    for trigger_id in TRIGGERS:
        await container.scripts.delete_trigger(trigger=trigger_id)
        click.echo(f"Deleted trigger {trigger_id}")
