"""
Capability Routers Package - Presentation Layer

This package contains one FastAPI router class per capability kind and the
mounting logic that exposes a robot's registered capabilities over HTTP.
"""

from .base import CapabilityRouter
from .basic_control_router import BasicControlCapabilityRouter
from .locate_router import LocateCapabilityRouter
from .manual_control_router import ManualControlCapabilityRouter
from .mount import CAPABILITY_ROUTERS, mount_capability_routers
from .wifi_configuration_router import WifiConfigurationCapabilityRouter
from .zone_cleaning_router import ZoneCleaningCapabilityRouter

__all__ = [
    "CapabilityRouter",
    "CAPABILITY_ROUTERS",
    "mount_capability_routers",
    "BasicControlCapabilityRouter",
    "LocateCapabilityRouter",
    "ManualControlCapabilityRouter",
    "WifiConfigurationCapabilityRouter",
    "ZoneCleaningCapabilityRouter",
]
