"""
Capability Router Mounting - Presentation Layer

The table below is the only place that knows which capability types have a
web representation. Mounting walks the robot's registry once; a capability
type that is not registered has no routes at all, so its whole sub-tree
answers 404.
"""

from typing import Dict, List, Type

from fastapi import FastAPI

from valetudo.domain.capabilities import (
    BasicControlCapability,
    LocateCapability,
    ManualControlCapability,
    WifiConfigurationCapability,
    ZoneCleaningCapability,
)
from valetudo.domain.entities.robot import Robot
from valetudo.domain.repositories.config_store import IConfigStore
from valetudo.shared import CAPABILITIES_PREFIX, get_logger

from .base import CapabilityRouter
from .basic_control_router import BasicControlCapabilityRouter
from .locate_router import LocateCapabilityRouter
from .manual_control_router import ManualControlCapabilityRouter
from .wifi_configuration_router import WifiConfigurationCapabilityRouter
from .zone_cleaning_router import ZoneCleaningCapabilityRouter

logger = get_logger(__name__)

CAPABILITY_ROUTERS: Dict[str, Type[CapabilityRouter]] = {
    BasicControlCapability.TYPE: BasicControlCapabilityRouter,
    LocateCapability.TYPE: LocateCapabilityRouter,
    ManualControlCapability.TYPE: ManualControlCapabilityRouter,
    WifiConfigurationCapability.TYPE: WifiConfigurationCapabilityRouter,
    ZoneCleaningCapability.TYPE: ZoneCleaningCapabilityRouter,
}


def mount_capability_routers(
    app: FastAPI,
    robot: Robot,
    config_store: IConfigStore,
    prefix: str = CAPABILITIES_PREFIX,
    routers: Dict[str, Type[CapabilityRouter]] = CAPABILITY_ROUTERS,
) -> List[str]:
    """
    Mount one router per registered capability that has a router class.

    Args:
        app: Application to mount the routers on
        robot: Robot whose capability registry is walked
        config_store: Store injected into every router
        prefix: Path under which ``/{capability type}`` sub-trees are mounted
        routers: Capability type to router class table

    Returns:
        The capability types that were mounted, in registration order
    """
    mounted: List[str] = []

    for capability in robot.capabilities:
        capability_type = capability.get_type()
        router_cls = routers.get(capability_type)

        if router_cls is None:
            logger.info("capability_router.not_available", capability=capability_type)
            continue

        capability_router = router_cls(capability, config_store)
        app.include_router(
            capability_router.router, prefix=f"{prefix.rstrip('/')}/{capability_type}"
        )
        mounted.append(capability_type)
        logger.info("capability_router.mounted", capability=capability_type)

    return mounted
