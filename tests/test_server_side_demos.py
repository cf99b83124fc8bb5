import pytest

from azure.cosmos.exceptions import CosmosHttpResponseError

from demos import stored_procedures_demo, triggers_demo, udfs_demo
from demos.server_scripts import STORED_PROCEDURES, TRIGGERS, USER_DEFINED_FUNCTIONS
from demos.store import get_store_container

NORTH_AMERICA = {"united states", "canada", "mexico"}


# Python stand-ins for the JavaScript in demos/server_scripts.py


def _hello_world(container, parameters):
    return "Hello, World"


def _set_north_america(container, parameters):
    document, _ = parameters
    country = document["address"]["countryRegionName"]
    document["address"]["isNorthAmerica"] = country.lower() in NORTH_AMERICA
    return container.put(document)


def _ensure_unique_id(container, parameters):
    document = parameters[0]
    base_id, counter = document["id"], 0
    while document["id"] in container.items:
        counter += 1
        document["id"] = f"{base_id}_{counter}"
    return container.put(document)


def _bulk_insert(container, parameters):
    # Runs out of time after 7 documents per call
    batch = parameters[0][:7]
    for document in batch:
        container.put(document)
    return len(batch)


def _bulk_delete(container, parameters):
    matching = [document_id for document_id in container.items if document_id.startswith("bulk-")]
    for document_id in matching[:8]:
        del container.items[document_id]
    return {"deleted": len(matching[:8]), "continuation": len(matching) > 8}


def _validate_document(container, document):
    if not document.get("name"):
        raise CosmosHttpResponseError(status_code=400, message="Document must include a name")
    document["name"] = document["name"].strip()
    document["validatedAt"] = "2024-01-01T00:00:00.000Z"
    return document


def _update_metadata(container, document):
    postal_code = document["address"]["postalCode"]
    metadata_id = f"_metadata_{postal_code}"
    metadata = container.items.get(metadata_id) or {
        "id": metadata_id,
        "address": {"postalCode": postal_code},
        "demo": document.get("demo"),
        "documentCount": 0,
    }
    metadata["documentCount"] += 1
    metadata["lastDocumentId"] = document["id"]
    container.put(metadata)


def _evaluate_udfs(query, parameters, rows):
    if "STARTSWITH(c.id, 'udf-')" in query:
        rows = [row for row in rows if row["id"].startswith("udf-")]
    if "udfRegEx" in query:
        return [{"id": row["id"], "name": row["name"]} for row in rows if "Rental" in row["name"]]
    if "udfIsNorthAmerica" in query:
        wanted = query.endswith("= true")
        return [
            {"id": row["id"], "name": row["name"], "countryRegionName": row["address"]["countryRegionName"]}
            for row in rows
            if (row["address"]["countryRegionName"].lower() in NORTH_AMERICA) == wanted
        ]
    if "udfFormatCityStateZip" in query:
        return [
            {
                "name": row["name"],
                "location": "{city}, {stateProvinceName} {postalCode}".format(
                    postalCode=row["address"]["postalCode"], **row["address"]["location"]
                ),
            }
            for row in rows
        ]
    return rows


async def test_stored_procedures_demo_executes_every_procedure(fake_client, capsys):
    store = await get_store_container(fake_client)
    store.scripts.sproc_handlers.update(
        spHelloWorld=_hello_world,
        spSetNorthAmerica=_set_north_america,
        spEnsureUniqueId=_ensure_unique_id,
        spBulkInsert=_bulk_insert,
        spBulkDelete=_bulk_delete,
    )

    await stored_procedures_demo.run(fake_client)

    postal_code = stored_procedures_demo.POSTAL_CODE
    executions = [call[1:] for call in fake_client.calls if call[0] == "execute_stored_procedure"]
    assert executions == (
        [("spHelloWorld", postal_code), ("spSetNorthAmerica", postal_code)]
        + [("spEnsureUniqueId", postal_code)] * 3
        + [("spBulkInsert", postal_code)] * 3
        + [("spBulkDelete", postal_code)] * 3
    )
    assert [call[1] for call in fake_client.calls if call[0] == "create_stored_procedure"] == list(STORED_PROCEDURES)
    assert [call[1] for call in fake_client.calls if call[0] == "delete_stored_procedure"] == list(STORED_PROCEDURES)
    assert [call[1] for call in fake_client.calls if call[0] == "delete_item"] == [
        "sproc-na-1",
        "sproc-unique",
        "sproc-unique_1",
        "sproc-unique_2",
    ]
    assert store.items == {}
    assert store.scripts.sprocs == {}

    out = capsys.readouterr().out
    assert f"Total stored procedures: {len(STORED_PROCEDURES)}" in out
    assert "Result: Hello, World" in out
    assert "Result: isNorthAmerica = True" in out
    assert "New document id: sproc-unique_2" in out
    assert "Inserted 7 documents (7 total, 13 remaining)" in out
    assert "Inserted 6 documents (20 total, 0 remaining)" in out
    assert "Deleted 4 documents (20 total)" in out


async def test_bulk_insert_fails_when_a_call_inserts_nothing(fake_client):
    store = await get_store_container(fake_client)
    await store.scripts.create_stored_procedure(body={"id": "spBulkInsert", "body": STORED_PROCEDURES["spBulkInsert"]})
    results = iter([5, 0, 0])
    store.scripts.sproc_handlers["spBulkInsert"] = lambda container, parameters: next(results)

    with pytest.raises(RuntimeError, match="15 remaining"):
        await stored_procedures_demo.execute_bulk_insert(store)

    assert [call[1] for call in fake_client.calls if call[0] == "execute_stored_procedure"] == ["spBulkInsert"] * 2


async def test_triggers_demo_validates_documents_and_reports_rejection(fake_client, capsys):
    store = await get_store_container(fake_client)
    store.trigger_handlers.update(
        trgValidateDocument=_validate_document,
        trgUpdateMetadata=_update_metadata,
    )

    await triggers_demo.run(fake_client)

    metadata_id = triggers_demo.METADATA_DOCUMENT_ID
    assert fake_client.calls == [
        ("create_trigger", "trgValidateDocument"),
        ("create_trigger", "trgUpdateMetadata"),
        ("create_item", "trigger-1"),
        ("create_item", "trigger-2"),
        ("read_item", metadata_id),
        ("delete_item", "trigger-1"),
        ("delete_item", "trigger-2"),
        ("delete_item", metadata_id),
        ("create_item", "trigger-invalid"),
        ("delete_trigger", "trgValidateDocument"),
        ("delete_trigger", "trgUpdateMetadata"),
    ]
    assert store.items == {}
    assert store.scripts.triggers == {}

    out = capsys.readouterr().out
    assert f"Total triggers: {len(TRIGGERS)}" in out
    assert "Created pre-trigger trgValidateDocument on create" in out
    assert "Created document trigger-2; name = 'Boston Customer'; validated at 2024-01-01T00:00:00.000Z" in out
    assert '"documentCount": 2' in out
    assert '"lastDocumentId": "trigger-2"' in out
    assert "Document was rejected by the trigger:\nStatus code: 400 Document must include a name\n" in out
    assert "unexpectedly accepted" not in out


async def test_triggers_demo_cleans_up_a_document_the_trigger_accepts(fake_client, capsys):
    store = await get_store_container(fake_client)
    await triggers_demo.create_triggers(store)

    await triggers_demo.execute_rejecting_trigger(store)

    assert ("delete_item", "trigger-invalid") in fake_client.calls
    assert store.items == {}
    assert "Document was unexpectedly accepted" in capsys.readouterr().out


async def test_udfs_demo_queries_only_its_sample_documents(fake_client, capsys):
    store = await get_store_container(fake_client)
    store.put({"id": "demo-rental", "name": "Rental Car Customer", "address": {"postalCode": "10001"}})
    store.query_handler = _evaluate_udfs

    await udfs_demo.run(fake_client)

    assert [call[1] for call in fake_client.calls if call[0] == "create_user_defined_function"] == list(
        USER_DEFINED_FUNCTIONS
    )
    assert [call[1] for call in fake_client.calls if call[0] == "upsert_item"] == list(udfs_demo.SAMPLE_CUSTOMERS)
    assert [call[1] for call in fake_client.calls if call[0] == "delete_item"] == list(udfs_demo.SAMPLE_CUSTOMERS)
    assert [call[1] for call in fake_client.calls if call[0] == "delete_user_defined_function"] == list(
        USER_DEFINED_FUNCTIONS
    )
    assert list(store.items) == ["demo-rental"]
    assert store.scripts.udfs == {}
    assert len(store.queries) == 4
    assert all("STARTSWITH(c.id, 'udf-')" in query for query, _, _ in store.queries)

    out = capsys.readouterr().out
    assert f"Total user defined functions: {len(USER_DEFINED_FUNCTIONS)}" in out
    assert " Id: udf-1; Name: Contoso Rental Shop" in out
    assert " Id: udf-3; Name: Northwind Rental Store" in out
    assert "Rental Car Customer" not in out
    assert " Id: udf-2; Name: Fabrikam Outlet; Country: United States" in out
    assert " Id: udf-3; Name: Northwind Rental Store; Country: France" in out
    assert " Fabrikam Outlet located in Portland, Oregon 97201" in out
