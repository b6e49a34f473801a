"""Roborock robot - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict

from valetudo.domain.entities.attributes import (
    BatteryFlag,
    BatteryStateAttribute,
    PresetSelectionStateAttribute,
    PresetType,
    PresetValue,
    RobotState,
    StatusFlag,
    StatusStateAttribute,
    StatusValue,
)
from valetudo.domain.entities.errors import DeviceTransportError
from valetudo.domain.entities.robot import Robot
from valetudo.domain.gateways.device_transport import IDeviceTransport
from valetudo.domain.repositories.config_store import IConfigStore
from valetudo.shared import get_logger

from .capabilities import (
    RoborockBasicControlCapability,
    RoborockLocateCapability,
    RoborockManualControlCapability,
    RoborockWifiConfigurationCapability,
    RoborockZoneCleaningCapability,
)

logger = get_logger(__name__)

STATUS_MAP: Dict[int, Dict[str, Any]] = {
    1: {"value": StatusValue.IDLE},
    2: {"value": StatusValue.IDLE},
    3: {"value": StatusValue.IDLE},
    5: {"value": StatusValue.CLEANING},
    6: {"value": StatusValue.RETURNING},
    7: {"value": StatusValue.MANUAL_CONTROL},
    8: {"value": StatusValue.DOCKED},
    9: {"value": StatusValue.ERROR},
    10: {"value": StatusValue.PAUSED},
    11: {"value": StatusValue.CLEANING, "flag": StatusFlag.SPOT},
    12: {"value": StatusValue.ERROR},
    13: {"value": StatusValue.IDLE},
    14: {"value": StatusValue.IDLE},
    15: {"value": StatusValue.RETURNING},
    16: {"value": StatusValue.MOVING, "flag": StatusFlag.TARGET},
    17: {"value": StatusValue.CLEANING, "flag": StatusFlag.ZONE},
    18: {"value": StatusValue.CLEANING, "flag": StatusFlag.SEGMENT},
    100: {"value": StatusValue.DOCKED},
}

FAN_SPEEDS: Dict[int, PresetValue] = {
    101: PresetValue.LOW,
    102: PresetValue.MEDIUM,
    103: PresetValue.HIGH,
    104: PresetValue.MAX,
    105: PresetValue.OFF,
}


class RoborockRobot(Robot):
    """Roborock vacuum speaking the miIO command set."""

    def __init__(self, config: IConfigStore, transport: IDeviceTransport):
        super().__init__(config=config, transport=transport)

        for capability_cls in (
            RoborockBasicControlCapability,
            RoborockLocateCapability,
            RoborockManualControlCapability,
            RoborockWifiConfigurationCapability,
            RoborockZoneCleaningCapability,
        ):
            self.register_capability(capability_cls(robot=self))

    def get_manufacturer(self) -> str:
        return "Roborock"

    def get_model_name(self) -> str:
        return "S5"

    async def poll_state(self) -> RobotState:
        response = await self.send_command("get_status")
        if isinstance(response, list) and response:
            response = response[0]
        if not isinstance(response, dict):
            raise DeviceTransportError("Unexpected get_status response")

        self.parse_status(response)
        return self.state

    def parse_status(self, data: Dict[str, Any]) -> None:
        """Upsert the attributes derived from a ``get_status`` payload."""
        if "state" in data:
            status = STATUS_MAP.get(int(data["state"]), {"value": StatusValue.IDLE})
            error_code = int(data.get("error_code", 0))
            self.state.upsert_first_matching(
                StatusStateAttribute(
                    value=status["value"],
                    flag=status.get("flag", StatusFlag.NONE),
                    error_description=(
                        f"Error code {error_code}" if error_code else None
                    ),
                )
            )

        if "battery" in data:
            level = int(data["battery"])
            status = self.state.get_first_matching_of(StatusStateAttribute)
            if status is not None and status.value == StatusValue.DOCKED:
                flag = BatteryFlag.CHARGED if level >= 100 else BatteryFlag.CHARGING
            else:
                flag = BatteryFlag.DISCHARGING
            self.state.upsert_first_matching(
                BatteryStateAttribute(level=level, flag=flag)
            )

        if "fan_power" in data:
            fan_power = int(data["fan_power"])
            preset = FAN_SPEEDS.get(fan_power, PresetValue.CUSTOM)
            self.state.upsert_first_matching(
                PresetSelectionStateAttribute(
                    type=PresetType.FAN_SPEED,
                    value=preset,
                    custom_value=fan_power if preset == PresetValue.CUSTOM else None,
                )
            )

        logger.debug("roborock.status_parsed", attributes=len(self.state.attributes))
