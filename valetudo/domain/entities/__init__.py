"""
Domain Entities Package

This package contains the core domain entities: robot state attributes,
zones, wifi configuration and domain errors. The ``Robot`` base class lives
in ``valetudo.domain.entities.robot`` and is imported from there, since it
depends on the capability package.
"""

from .attributes import (
    AttachmentStateAttribute,
    AttachmentType,
    Attribute,
    AttributeClass,
    AttributeContainer,
    BatteryFlag,
    BatteryStateAttribute,
    ConsumableStateAttribute,
    ConsumableSubType,
    ConsumableType,
    ConsumableUnit,
    PresetSelectionStateAttribute,
    PresetType,
    PresetValue,
    RobotState,
    StatusFlag,
    StatusStateAttribute,
    StatusValue,
)
from .errors import (
    CapabilityNotImplementedError,
    CapabilityRegistrationError,
    DeviceTransportError,
    DomainError,
    InvalidArgumentError,
    NotFoundError,
    ZonePresetNotFoundError,
)
from .wifi import (
    WifiConfiguration,
    WifiCredentials,
    WifiCredentialsType,
    WifiDetails,
    WifiFrequency,
    WifiState,
)
from .zone import Point, Zone, ZonePoints, ZonePreset

__all__ = [
    "AttachmentStateAttribute",
    "AttachmentType",
    "Attribute",
    "AttributeClass",
    "AttributeContainer",
    "BatteryFlag",
    "BatteryStateAttribute",
    "ConsumableStateAttribute",
    "ConsumableSubType",
    "ConsumableType",
    "ConsumableUnit",
    "PresetSelectionStateAttribute",
    "PresetType",
    "PresetValue",
    "RobotState",
    "StatusFlag",
    "StatusStateAttribute",
    "StatusValue",
    "CapabilityNotImplementedError",
    "CapabilityRegistrationError",
    "DeviceTransportError",
    "DomainError",
    "InvalidArgumentError",
    "NotFoundError",
    "ZonePresetNotFoundError",
    "WifiConfiguration",
    "WifiCredentials",
    "WifiCredentialsType",
    "WifiDetails",
    "WifiFrequency",
    "WifiState",
    "Point",
    "Zone",
    "ZonePoints",
    "ZonePreset",
]
