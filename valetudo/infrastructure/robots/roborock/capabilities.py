"""Roborock implementations of the capability contracts."""

from __future__ import annotations

import itertools
import math
from typing import Any, Dict, List

from valetudo.domain.capabilities import (
    BasicControlCapability,
    LocateCapability,
    ManualControlCapability,
    MovementCommand,
    WifiConfigurationCapability,
    ZoneCleaningCapability,
)
from valetudo.domain.entities.errors import InvalidArgumentError
from valetudo.domain.entities.wifi import (
    WifiConfiguration,
    WifiCredentialsType,
    WifiDetails,
    WifiFrequency,
    WifiState,
)
from valetudo.domain.entities.zone import Zone
from valetudo.infrastructure.gateways.wireless import get_embedded_wireless_configuration
from valetudo.shared import EMBEDDED_CONFIG_KEY

# velocity in m/s, omega in rad/s
_MOVEMENTS: Dict[MovementCommand, Dict[str, float]] = {
    MovementCommand.FORWARD: {"velocity": 0.3, "omega": 0.0},
    MovementCommand.BACKWARD: {"velocity": -0.3, "omega": 0.0},
    MovementCommand.ROTATE_CLOCKWISE: {"velocity": 0.0, "omega": -math.pi / 4},
    MovementCommand.ROTATE_COUNTERCLOCKWISE: {"velocity": 0.0, "omega": math.pi / 4},
}
MANUAL_MOVE_DURATION_MS = 1500


class RoborockBasicControlCapability(BasicControlCapability):
    async def start(self) -> None:
        await self.robot.send_command("app_start")

    async def stop(self) -> None:
        await self.robot.send_command("app_stop")

    async def pause(self) -> None:
        await self.robot.send_command("app_pause")

    async def home(self) -> None:
        await self.robot.send_command("app_charge")


class RoborockLocateCapability(LocateCapability):
    async def locate(self) -> None:
        await self.robot.send_command("find_me", [""])


class RoborockManualControlCapability(ManualControlCapability):
    def __init__(self, robot):
        super().__init__(robot)
        self._sequence = itertools.count(1)

    async def enter_manual_control(self) -> None:
        await self.robot.send_command("app_rc_start")

    async def leave_manual_control(self) -> None:
        await self.robot.send_command("app_rc_end")

    async def manual_control(self, action: MovementCommand) -> None:
        movement = _MOVEMENTS.get(action)
        if movement is None:
            raise InvalidArgumentError(f"Invalid movement command {action}")

        await self.robot.send_command(
            "app_rc_move",
            [
                {
                    **movement,
                    "seqnum": next(self._sequence),
                    "duration": MANUAL_MOVE_DURATION_MS,
                }
            ],
        )


class RoborockWifiConfigurationCapability(WifiConfigurationCapability):
    async def get_wifi_configuration(self) -> WifiConfiguration:
        if await self.robot.config.get(EMBEDDED_CONFIG_KEY) is True:
            return await get_embedded_wireless_configuration("wlan0")

        output = WifiConfiguration(details=WifiDetails(state=WifiState.UNKNOWN))
        res = await self.robot.send_command("get_network_info")

        if res != "unknown_method":
            if isinstance(res, dict) and res.get("bssid"):
                output.ssid = res.get("ssid")
                output.details = WifiDetails(
                    state=WifiState.CONNECTED,
                    signal=int(res["rssi"]) if "rssi" in res else None,
                    ips=[res["ip"]] if res.get("ip") else [],
                    frequency=WifiFrequency.W2_4GHZ,
                )
            else:
                output.details.state = WifiState.NOT_CONNECTED

        return output

    async def set_wifi_configuration(self, wifi_config: WifiConfiguration) -> None:
        credentials = wifi_config.credentials if wifi_config else None
        if (
            not wifi_config
            or not wifi_config.ssid
            or credentials is None
            or credentials.type != WifiCredentialsType.WPA2_PSK
            or not credentials.password
        ):
            raise InvalidArgumentError("Invalid wifiConfig")

        await self.robot.send_command(
            "miIO.config_router",
            {"ssid": wifi_config.ssid, "passwd": credentials.password, "uid": 0},
        )


def _to_roborock_area(zone: Zone) -> List[Any]:
    points = (zone.points.p_a, zone.points.p_b, zone.points.p_c, zone.points.p_d)
    xs = [point.x for point in points]
    ys = [point.y for point in points]
    return [min(xs), min(ys), max(xs), max(ys), zone.iterations]


class RoborockZoneCleaningCapability(ZoneCleaningCapability):
    async def start(self, zones: List[Zone]) -> None:
        await self.robot.send_command(
            "app_zoned_clean", [_to_roborock_area(zone) for zone in zones]
        )
