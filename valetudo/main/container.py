"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict

from dependency_injector import containers, providers

from valetudo.application.use_cases.robot_use_cases import (
    GetRobotInfoUseCase,
    GetRobotStateUseCase,
)
from valetudo.domain.entities.robot import Robot
from valetudo.domain.gateways.device_transport import IDeviceTransport
from valetudo.domain.repositories.config_store import IConfigStore
from valetudo.infrastructure.database import MongoDatabase
from valetudo.infrastructure.gateways import HttpDeviceTransport
from valetudo.infrastructure.repositories import (
    InMemoryConfigStore,
    JsonFileConfigStore,
    MongoConfigStore,
)
from valetudo.infrastructure.robots import ROBOT_IMPLEMENTATIONS
from valetudo.shared import EMBEDDED_CONFIG_KEY, ZONE_PRESETS_CONFIG_KEY, get_logger

from .config import AppSettings

logger = get_logger(__name__)


def build_config_defaults(embedded: bool) -> Dict[str, Any]:
    """Values returned by the config store for keys that were never set."""
    return {ZONE_PRESETS_CONFIG_KEY: {}, EMBEDDED_CONFIG_KEY: bool(embedded)}


def build_robot(
    implementation: str, config: IConfigStore, transport: IDeviceTransport
) -> Robot:
    """
    Instantiate the configured device family.

    Raises:
        ValueError: If no device family is known under that name
    """
    robot_cls = ROBOT_IMPLEMENTATIONS.get(implementation.lower())
    if robot_cls is None:
        raise ValueError(
            f"Unknown robot implementation '{implementation}'. "
            f"Available: {', '.join(sorted(ROBOT_IMPLEMENTATIONS))}"
        )

    robot = robot_cls(config=config, transport=transport)
    logger.info(
        "container.robot.created",
        implementation=implementation,
        capabilities=robot.capabilities.types(),
    )
    return robot


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    config_defaults = providers.Callable(
        build_config_defaults,
        embedded=config.robot.embedded,
    )

    config_store = providers.Selector(
        providers.Callable(
            lambda backend: backend.value if hasattr(backend, "value") else str(backend),
            config.robot.config_backend,
        ),
        memory=providers.Singleton(InMemoryConfigStore, defaults=config_defaults),
        json=providers.Singleton(
            JsonFileConfigStore,
            path=config.robot.config_path,
            defaults=config_defaults,
        ),
        mongo=providers.Singleton(
            MongoConfigStore,
            mongo_database=mongo_database,
            collection_name=config.database.config_collection,
            defaults=config_defaults,
        ),
    )

    # Gateways
    device_transport = providers.Singleton(
        HttpDeviceTransport,
        base_url=config.robot.transport_url,
        timeout=config.robot.transport_timeout,
    )

    # Domain
    robot = providers.Singleton(
        build_robot,
        implementation=config.robot.implementation,
        config=config_store,
        transport=device_transport,
    )

    # Application (use cases)
    get_robot_info_use_case = providers.Factory(
        GetRobotInfoUseCase,
        robot=robot,
    )

    get_robot_state_use_case = providers.Factory(
        GetRobotStateUseCase,
        robot=robot,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    Loads (or creates) the configuration store on startup and releases it on
    shutdown.
    """
    container = get_container()
    config_store = container.config_store()

    try:
        logger.info("container.config_store.initialize")
        await config_store.initialize()

        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.config_store.close")
        config_store.close()

        logger.info("container.resources.shutdown")
