from __future__ import annotations

import os
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Tuple

import pytest

# The application module builds an app on import; keep it off the filesystem.
os.environ.setdefault("ROBOT_CONFIG_BACKEND", "memory")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from valetudo.infrastructure.repositories.config_stores import (  # noqa: E402
    InMemoryConfigStore,
)
from valetudo.infrastructure.robots.roborock import RoborockRobot  # noqa: E402
from valetudo.shared import (  # noqa: E402
    EMBEDDED_CONFIG_KEY,
    ZONE_PRESETS_CONFIG_KEY,
)


def make_zone(x1: int, y1: int, x2: int, y2: int, iterations: int = 1) -> Dict[str, Any]:
    """Zone in wire format, corners clockwise from the top left."""
    return {
        "points": {
            "pA": {"x": x1, "y": y1},
            "pB": {"x": x2, "y": y1},
            "pC": {"x": x2, "y": y2},
            "pD": {"x": x1, "y": y2},
        },
        "iterations": iterations,
    }


class FakeTransport:
    """Records commands and answers from a per-method script."""

    def __init__(self, responses: Optional[Dict[str, Any]] = None) -> None:
        self.responses: Dict[str, Any] = dict(responses or {})
        self.commands: List[Tuple[str, Any]] = []

    async def send_command(self, method: str, params: Optional[Any] = None) -> Any:
        self.commands.append((method, params))
        response = self.responses.get(method, "ok")
        if isinstance(response, Exception):
            raise response
        return response


class FakeCollection:
    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.dropped_indexes: List[str] = []
        self.created_indexes: List[tuple[Any, ...]] = []

    def find_one(self, query: Dict[str, Any]) -> Dict[str, Any] | None:
        key = query.get("id")
        if not isinstance(key, str):
            return None
        document = self.documents.get(key)
        return dict(document) if document is not None else None

    def replace_one(
        self, query: Dict[str, Any], document: Dict[str, Any], upsert: bool = False
    ) -> Any:
        key = query.get("id")
        if not isinstance(key, str) or (key not in self.documents and not upsert):
            return SimpleNamespace(matched_count=0, acknowledged=True)
        matched = 1 if key in self.documents else 0
        self.documents[key] = dict(document)
        return SimpleNamespace(matched_count=matched, acknowledged=True)

    def drop_index(self, index_name: str) -> None:
        self.dropped_indexes.append(index_name)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys


class FakeMongoDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.unique_indexes: List[tuple[str, str, str]] = []
        self.closed = False

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def find_one(self, collection_name: str, query: Dict[str, Any]) -> Any:
        return self.get_collection(collection_name).find_one(query)

    async def upsert_one(
        self, collection_name: str, query: Dict[str, Any], document: Dict[str, Any]
    ) -> Dict[str, Any]:
        self.get_collection(collection_name).replace_one(query, document, upsert=True)
        return document

    async def ensure_unique_index(
        self, collection_name: str, field_name: str, index_name: str
    ) -> None:
        self.unique_indexes.append((collection_name, field_name, index_name))

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def config_store() -> InMemoryConfigStore:
    return InMemoryConfigStore(
        defaults={ZONE_PRESETS_CONFIG_KEY: {}, EMBEDDED_CONFIG_KEY: False}
    )


@pytest.fixture()
def roborock_robot(
    config_store: InMemoryConfigStore, fake_transport: FakeTransport
) -> RoborockRobot:
    return RoborockRobot(config=config_store, transport=fake_transport)


@pytest.fixture()
def kitchen_zone() -> Dict[str, Any]:
    return make_zone(0, 0, 100, 100)
