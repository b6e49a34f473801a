"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .robot_dto import (
    CapabilityActionDTO,
    ManualControlActionDTO,
    RobotInfoDTO,
    RobotStateDTO,
)
from .wifi_dto import (
    WifiConfigurationDTO,
    WifiConfigurationUpdateDTO,
    WifiCredentialsDTO,
    WifiDetailsDTO,
)
from .zone_dto import (
    LegacyZonePresetDTO,
    PointDTO,
    PresetsCleanRequestDTO,
    ZoneDTO,
    ZonePointsDTO,
    ZonePresetCreateDTO,
    ZonesCleanRequestDTO,
)

__all__ = [
    "CapabilityActionDTO",
    "ManualControlActionDTO",
    "RobotInfoDTO",
    "RobotStateDTO",
    "WifiConfigurationDTO",
    "WifiConfigurationUpdateDTO",
    "WifiCredentialsDTO",
    "WifiDetailsDTO",
    "LegacyZonePresetDTO",
    "PointDTO",
    "PresetsCleanRequestDTO",
    "ZoneDTO",
    "ZonePointsDTO",
    "ZonePresetCreateDTO",
    "ZonesCleanRequestDTO",
]
