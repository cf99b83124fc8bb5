"""
Databases demo: list, create and delete databases in the account.
"""

from azure.cosmos.aio import CosmosClient

import click

from demos.view import heading, view_resource
from shared.cosmos_config import NEW_DATABASE_ID


async def run(client: CosmosClient) -> None:
    await view_databases(client)

    await create_database(client, NEW_DATABASE_ID)
    await view_databases(client)

    await delete_database(client, NEW_DATABASE_ID)


async def view_databases(client: CosmosClient) -> None:
    heading("View Databases")

    count = 0
    async for database in client.list_databases():
        count += 1
        click.echo()
        click.echo(f" Database #{count}")
        view_resource("Database", database)

    click.echo()
    click.echo(f"Total databases: {count}")


async def create_database(client: CosmosClient, database_id: str) -> None:
    heading(f"Create Database {database_id}")

    database = await client.create_database(id=database_id)
    properties = await database.read()

    click.echo()
    click.echo("Created new database")
    view_resource("Database", properties)


async def delete_database(client: CosmosClient, database_id: str) -> None:
    heading(f"Delete Database {database_id}")

    await client.delete_database(database_id)

    click.echo(f"Deleted database {database_id}")
