"""
Azure Cosmos DB Demo Configuration.

Centralized names and defaults for every resource the demos create.
This keeps the demos and the cleanup routine in agreement about what exists.
"""

# =============================================================================
# DEMO DATABASES
# =============================================================================

# Database that holds the collections used by most demos
DEMO_DATABASE_ID = "mydb"

# Database created and deleted by the databases demo
NEW_DATABASE_ID = "MyNewDatabase"

# =============================================================================
# COLLECTION DEFAULTS
# =============================================================================

# Provisioned throughput (RU/sec) used when a demo does not specify one
DEFAULT_THROUGHPUT = 1000

# Partition key path used when a demo does not specify one
DEFAULT_PARTITION_KEY = "/partitionKey"

# Long-lived collection used by the document, script and permission demos
# Format: (collection_id, partition_key_path)
STORE_COLLECTION = ("mystore", "/address/postalCode")

# Collections created (and removed again) by the collections and indexing demos
DEMO_COLLECTIONS = {
    "collection1": "MyCollection1",
    "collection2": "MyCollection2",
    "excluded_path": "ExcludedPathIndexing",
    "no_index": "NoAutomaticIndexing",
    "composite": "CompositeAndSpatialIndexing",
}

# =============================================================================
# USERS AND DOCUMENTS
# =============================================================================

DEMO_USERS = ["Alice", "Tom"]

# Every document the demos write carries this marker so cleanup can find them
DEMO_DOCUMENT_TAG = "sdk-demo"

# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_demo_collection_id(logical_name: str) -> str:
    """Get the actual collection id for a logical demo collection name."""
    if logical_name in DEMO_COLLECTIONS:
        return DEMO_COLLECTIONS[logical_name]
    raise ValueError(f"Unknown demo collection: {logical_name}")
