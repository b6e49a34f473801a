"""
Repositories Package - Infrastructure Layer

This package contains the configuration store backends implementing
``IConfigStore``.
"""

from .config_stores import InMemoryConfigStore, JsonFileConfigStore, MongoConfigStore

__all__ = ["InMemoryConfigStore", "JsonFileConfigStore", "MongoConfigStore"]
