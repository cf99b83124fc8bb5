"""
User defined functions demo: register UDFs and call them from SQL queries.
"""

from azure.cosmos.aio import ContainerProxy, CosmosClient

import click

from demos.models import new_customer
from demos.server_scripts import USER_DEFINED_FUNCTIONS
from demos.store import get_store_container
from demos.view import heading, view_resource

# id -> (name, city, state, postal code, country)
SAMPLE_CUSTOMERS = {
    "udf-1": ("Contoso Rental Shop", "Toronto", "Ontario", "M5H 2N2", "Canada"),
    "udf-2": ("Fabrikam Outlet", "Portland", "Oregon", "97201", "United States"),
    "udf-3": ("Northwind Rental Store", "Paris", "Ile-de-France", "75001", "France"),
}


async def run(client: CosmosClient) -> None:
    container = await get_store_container(client)

    await create_user_defined_functions(container)
    await view_user_defined_functions(container)

    await create_sample_documents(container)

    await execute_regex(container)
    await execute_is_north_america(container)
    await execute_format_city_state_zip(container)

    await delete_sample_documents(container)
    await delete_user_defined_functions(container)


async def create_user_defined_functions(container: ContainerProxy) -> None:
    heading("Create User Defined Functions")

    for udf_id, body in USER_DEFINED_FUNCTIONS.items():
        result = await container.scripts.create_user_defined_function(body={"id": udf_id, "body": body})
        click.echo(f"Created user defined function {result['id']} ({result['_rid']})")


async def view_user_defined_functions(container: ContainerProxy) -> None:
    heading(f"View User Defined Functions in {container.id}")

    count = 0
    async for udf in container.scripts.list_user_defined_functions():
        count += 1
        click.echo()
        click.echo(f" User defined function #{count}")
        view_resource("UDF", udf)

    click.echo()
    click.echo(f"Total user defined functions: {count}")


async def create_sample_documents(container: ContainerProxy) -> None:
    for document_id, (name, city, state, postal_code, country) in SAMPLE_CUSTOMERS.items():
        customer = new_customer(document_id, name, city, state, postal_code, country)
        await container.upsert_item(body=customer.to_document())


async def execute_regex(container: ContainerProxy) -> None:
    heading("Query using Regular Expression UDF")

    query = "SELECT c.id, c.name FROM c WHERE STARTSWITH(c.id, 'udf-') AND udf.udfRegEx(c.name, 'Rental') != null"
    async for document in container.query_items(query=query):
        click.echo(f" Id: {document['id']}; Name: {document['name']}")


async def execute_is_north_america(container: ContainerProxy) -> None:
    heading("Query using Is North America UDF")

    query = (
        "SELECT c.id, c.name, c.address.countryRegionName FROM c "
        "WHERE STARTSWITH(c.id, 'udf-') AND udf.udfIsNorthAmerica(c.address.countryRegionName) = true"
    )
    async for document in container.query_items(query=query):
        click.echo(f" Id: {document['id']}; Name: {document['name']}; Country: {document['countryRegionName']}")

    heading("Query using Is North America UDF (outside North America)")

    query = (
        "SELECT c.id, c.name, c.address.countryRegionName FROM c "
        "WHERE STARTSWITH(c.id, 'udf-') AND udf.udfIsNorthAmerica(c.address.countryRegionName) = false"
    )
    async for document in container.query_items(query=query):
        click.echo(f" Id: {document['id']}; Name: {document['name']}; Country: {document['countryRegionName']}")


async def execute_format_city_state_zip(container: ContainerProxy) -> None:
    heading("Listing names with city, state, zip (using UDF to format)")

    query = "SELECT c.name, udf.udfFormatCityStateZip(c) AS location FROM c WHERE STARTSWITH(c.id, 'udf-')"
    async for document in container.query_items(query=query):
        click.echo(f" {document['name']} located in {document['location']}")


async def delete_sample_documents(container: ContainerProxy) -> None:
    for document_id, (_, _, _, postal_code, _) in SAMPLE_CUSTOMERS.items():
        await container.delete_item(item=document_id, partition_key=postal_code)


async def delete_user_defined_functions(container: ContainerProxy) -> None:
    heading("Delete User Defined Functions")

    for udf_id in USER_DEFINED_FUNCTIONS:
        await container.scripts.delete_user_defined_function(udf=udf_id)
        click.echo(f"Deleted user defined function {udf_id}")
