"""
MongoDB Database - Infrastructure Layer

This module provides a MongoDB database client for interacting with MongoDB.
It handles connection, collections, and the document operations used by the
configuration store.
"""

from typing import Any, Dict, Optional

import pymongo.errors
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from valetudo.shared import get_logger

logger = get_logger(__name__)


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a collection from the database.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB collection
        """
        return self.db[collection_name]

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Find a single document in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents

        Returns:
            The document if found, None otherwise
        """
        return self.db[collection_name].find_one(query)

    async def upsert_one(
        self, collection_name: str, query: Dict[str, Any], document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Replace the document matching ``query``, inserting it if absent.

        Args:
            collection_name: Name of the collection
            query: Query to match document to replace
            document: New document

        Returns:
            The new document

        Raises:
            Exception: If the write is not acknowledged
        """
        result = self.db[collection_name].replace_one(query, document, upsert=True)
        if not result.acknowledged:
            raise Exception(f"Failed to upsert document in {collection_name}")
        return document

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    def _safe_drop_index(self, collection_name: str, index_name: str) -> None:
        try:
            self.db[collection_name].drop_index(index_name)
        except pymongo.errors.OperationFailure:
            # Index doesn't exist, nothing to do
            pass

    async def ensure_unique_index(
        self, collection_name: str, field_name: str, index_name: str
    ) -> None:
        """
        (Re)create a unique index on a single field.

        Args:
            collection_name: Name of the collection
            field_name: Field the index is built on
            index_name: Name of the index
        """
        self._safe_drop_index(collection_name, index_name)
        try:
            self.db[collection_name].create_index(
                field_name, name=index_name, unique=True
            )
        except pymongo.errors.OperationFailure as e:
            logger.warning(
                "mongo.index.create_failed",
                collection=collection_name,
                index=index_name,
                error=str(e),
            )
