"""
Shared modules for the Cosmos DB SDK demos.

This package contains the resource names and defaults used across the demos.
"""

from shared.cosmos_config import (
    DEMO_DATABASE_ID,
    NEW_DATABASE_ID,
    DEFAULT_THROUGHPUT,
    DEFAULT_PARTITION_KEY,
    STORE_COLLECTION,
    DEMO_COLLECTIONS,
    DEMO_USERS,
    DEMO_DOCUMENT_TAG,
)

__all__ = [
    "DEMO_DATABASE_ID",
    "NEW_DATABASE_ID",
    "DEFAULT_THROUGHPUT",
    "DEFAULT_PARTITION_KEY",
    "STORE_COLLECTION",
    "DEMO_COLLECTIONS",
    "DEMO_USERS",
    "DEMO_DOCUMENT_TAG",
]
