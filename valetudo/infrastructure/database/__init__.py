"""
Database package - Infrastructure Layer

This package contains the MongoDB client used by the Mongo configuration
store.
"""

from valetudo.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
