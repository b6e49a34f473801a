"""
Capabilities Package - Domain Layer

This package contains the capability contracts a robot may support and the
registry that records which of them a concrete robot provides.
"""

from .base import Capability
from .basic_control import BasicControlCapability
from .locate import LocateCapability
from .manual_control import ManualControlCapability, MovementCommand
from .registry import CapabilityRegistry
from .wifi_configuration import WifiConfigurationCapability
from .zone_cleaning import ZoneCleaningCapability

__all__ = [
    "Capability",
    "CapabilityRegistry",
    "BasicControlCapability",
    "LocateCapability",
    "ManualControlCapability",
    "MovementCommand",
    "WifiConfigurationCapability",
    "ZoneCleaningCapability",
]
