"""
Config Store Implementations - Infrastructure Layer

Three interchangeable backends for ``IConfigStore``: a process-local
dictionary, a single JSON file (the usual choice on the robot itself) and a
MongoDB collection. All of them copy values on the way in and out, and
writes are last-write-wins.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from valetudo.domain.repositories.config_store import IConfigStore
from valetudo.infrastructure.database.mongo_database import MongoDatabase
from valetudo.shared import get_logger

logger = get_logger(__name__)


class InMemoryConfigStore(IConfigStore):
    """Configuration kept in a dictionary for the lifetime of the process."""

    def __init__(self, defaults: Optional[Mapping[str, Any]] = None):
        self._defaults: Dict[str, Any] = copy.deepcopy(dict(defaults or {}))
        self._values: Dict[str, Any] = {}

    async def get(self, key: str) -> Any:
        if key in self._values:
            return copy.deepcopy(self._values[key])
        return copy.deepcopy(self._defaults.get(key))

    async def set(self, key: str, value: Any) -> None:
        self._values[key] = copy.deepcopy(value)
        logger.debug("config_store.set", key=key, backend="memory")


class JsonFileConfigStore(InMemoryConfigStore):
    """Configuration persisted as one JSON document, rewritten on every set."""

    def __init__(self, path: str, defaults: Optional[Mapping[str, Any]] = None):
        super().__init__(defaults)
        self.path = Path(path)

    async def initialize(self) -> None:
        if self.path.exists():
            self._values = json.loads(self.path.read_text(encoding="utf-8"))
            logger.info("config_store.loaded", path=str(self.path), keys=len(self._values))
        else:
            self._write()
            logger.info("config_store.created", path=str(self.path))

    async def set(self, key: str, value: Any) -> None:
        values = {**self._values, key: copy.deepcopy(value)}
        # Memory only changes once the file has been replaced
        self._write(values)
        self._values = values
        logger.debug("config_store.set", key=key, backend="json")

    def _write(self, values: Optional[Mapping[str, Any]] = None) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        payload = self._values if values is None else values
        tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)


class MongoConfigStore(IConfigStore):
    """Configuration stored as ``{"id": key, "value": value}`` documents."""

    INDEX_NAME = "config_id_idx"

    def __init__(
        self,
        mongo_database: MongoDatabase,
        collection_name: str = "config",
        defaults: Optional[Mapping[str, Any]] = None,
    ):
        self.mongo_database = mongo_database
        self.collection_name = collection_name
        self._defaults: Dict[str, Any] = copy.deepcopy(dict(defaults or {}))

    async def initialize(self) -> None:
        await self.mongo_database.ensure_unique_index(
            self.collection_name, "id", self.INDEX_NAME
        )

    async def get(self, key: str) -> Any:
        document = await self.mongo_database.find_one(self.collection_name, {"id": key})
        if document is None:
            return copy.deepcopy(self._defaults.get(key))
        return document.get("value")

    async def set(self, key: str, value: Any) -> None:
        await self.mongo_database.upsert_one(
            self.collection_name,
            {"id": key},
            {"id": key, "value": copy.deepcopy(value)},
        )
        logger.debug("config_store.set", key=key, backend="mongo")

    def close(self) -> None:
        self.mongo_database.close()
