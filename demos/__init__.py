"""
Demo routines, one per feature area of the Cosmos DB SQL API SDK.

Every routine takes an open CosmosClient and runs a fixed script against it.
"""

from types import MappingProxyType

from demos import (
    cleanup,
    collections_demo,
    databases_demo,
    documents_demo,
    indexing_demo,
    stored_procedures_demo,
    triggers_demo,
    udfs_demo,
    users_permissions_demo,
)

# Menu code -> demo routine
DEMO_COMMANDS = MappingProxyType({
    "DB": databases_demo.run,
    "CO": collections_demo.run,
    "DO": documents_demo.run,
    "IX": indexing_demo.run,
    "UP": users_permissions_demo.run,
    "SP": stored_procedures_demo.run,
    "TR": triggers_demo.run,
    "UF": udfs_demo.run,
    "C": cleanup.run,
})

__all__ = ["DEMO_COMMANDS"]
