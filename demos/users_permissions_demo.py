"""
Users & Permissions demo: database users and the resource permissions granted to them.
"""

from azure.cosmos.aio import ContainerProxy, CosmosClient, DatabaseProxy

import click

from demos.store import get_demo_database, get_store_container
from demos.view import heading, view_resource
from shared.cosmos_config import DEMO_USERS

# user id -> permission mode on the store collection
PERMISSION_MODES = {
    "Alice": "All",
    "Tom": "Read",
}


async def run(client: CosmosClient) -> None:
    database = await get_demo_database(client)
    container = await get_store_container(client)

    for user_id in DEMO_USERS:
        await create_user(database, user_id)
    await view_users(database)

    for user_id in DEMO_USERS:
        await create_permission(database, container, user_id, PERMISSION_MODES[user_id])
        await view_permissions(database, user_id)

    for user_id in DEMO_USERS:
        await delete_user(database, user_id)


async def view_users(database: DatabaseProxy) -> None:
    heading(f"View Users in {database.id}")

    count = 0
    async for user in database.list_users():
        count += 1
        click.echo()
        click.echo(f" User #{count}")
        view_resource("User", user)

    click.echo()
    click.echo(f"Total users in database {database.id}: {count}")


async def create_user(database: DatabaseProxy, user_id: str) -> None:
    heading(f"Create User {user_id} in {database.id}")

    user = await database.create_user(body={"id": user_id})
    properties = await user.read()

    click.echo(f"Created new user {user_id}")
    view_resource("User", properties)


async def create_permission(
    database: DatabaseProxy, container: ContainerProxy, user_id: str, permission_mode: str
) -> None:
    permission_id = f"{user_id}-{permission_mode}-{container.id}".lower()
    heading(f"Grant {permission_mode} permission to {user_id} on {container.id}")

    user = database.get_user_client(user_id)
    permission = await user.create_permission(
        body={
            "id": permission_id,
            "permissionMode": permission_mode,
            "resource": container.container_link,
        }
    )

    click.echo(f"Created new permission {permission.id}")
    view_resource("Permission", permission.properties)


async def view_permissions(database: DatabaseProxy, user_id: str) -> None:
    heading(f"View Permissions for {user_id}")

    user = database.get_user_client(user_id)
    count = 0
    async for permission in user.list_permissions():
        count += 1
        click.echo()
        click.echo(f" Permission #{count}")
        view_resource("Permission", permission)
        click.echo(f"       Mode: {permission.get('permissionMode')}")
        click.echo(f"   Resource: {permission.get('resource')}")
        click.echo(f"      Token: {'issued' if permission.get('_token') else 'none'}")

    click.echo()
    click.echo(f"Total permissions for {user_id}: {count}")


async def delete_user(database: DatabaseProxy, user_id: str) -> None:
    heading(f"Delete User {user_id} in {database.id}")

    await database.delete_user(user_id)

    click.echo(f"Deleted user {user_id} from database {database.id}")
