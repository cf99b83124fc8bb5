"""
Console rendering for the resource descriptors returned by the service.
"""

import json
from typing import Any, Dict

import click

# Label -> system property of every Cosmos DB resource
DESCRIPTOR_FIELDS = [
    ("Resource ID", "_rid"),
    ("Self Link", "_self"),
    ("E-Tag", "_etag"),
    ("Timestamp", "_ts"),
]


def heading(title: str) -> None:
    click.echo()
    click.echo(f">>> {title} <<<")


def view_resource(kind: str, resource: Dict[str, Any]) -> None:
    """Print the id and system properties of a database, collection, user, script..."""
    labels = [f"{kind} ID"] + [label for label, _ in DESCRIPTOR_FIELDS]
    width = max(len(label) for label in labels) + 4

    click.echo(f"{labels[0]:>{width}}: {resource.get('id')}")
    for label, key in DESCRIPTOR_FIELDS:
        click.echo(f"{label:>{width}}: {resource.get(key)}")


def view_document(document: Dict[str, Any]) -> None:
    """Print a document body without its system properties."""
    body = {key: value for key, value in document.items() if not key.startswith("_")}
    click.echo(json.dumps(body, indent=2, default=str))
