from __future__ import annotations

import math

import pytest

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
    WifiCredentials,
    WifiCredentialsType,
    WifiDetails,
    WifiFrequency,
    WifiState,
)
from valetudo.domain.entities.zone import Zone
from valetudo.infrastructure.robots.roborock import capabilities as roborock_capabilities
from tests.conftest import make_zone


@pytest.mark.asyncio
async def test_basic_control_commands(roborock_robot, fake_transport) -> None:
    basic = roborock_robot.get_capability(BasicControlCapability)

    await basic.start()
    await basic.stop()
    await basic.pause()
    await basic.home()

    assert [method for method, _ in fake_transport.commands] == [
        "app_start",
        "app_stop",
        "app_pause",
        "app_charge",
    ]


@pytest.mark.asyncio
async def test_locate_sends_find_me(roborock_robot, fake_transport) -> None:
    await roborock_robot.get_capability(LocateCapability).locate()

    assert fake_transport.commands == [("find_me", [""])]


@pytest.mark.asyncio
async def test_manual_control_moves_with_increasing_sequence(
    roborock_robot, fake_transport
) -> None:
    manual = roborock_robot.get_capability(ManualControlCapability)

    await manual.enter_manual_control()
    await manual.manual_control(MovementCommand.FORWARD)
    await manual.manual_control(MovementCommand.ROTATE_CLOCKWISE)
    await manual.leave_manual_control()

    methods = [method for method, _ in fake_transport.commands]
    assert methods == ["app_rc_start", "app_rc_move", "app_rc_move", "app_rc_end"]

    forward = fake_transport.commands[1][1][0]
    rotate = fake_transport.commands[2][1][0]
    assert forward == {"velocity": 0.3, "omega": 0.0, "seqnum": 1, "duration": 1500}
    assert rotate["seqnum"] == 2
    assert rotate["omega"] == pytest.approx(-math.pi / 4)


@pytest.mark.asyncio
async def test_zone_cleaning_sends_one_command_for_all_zones(
    roborock_robot, fake_transport
) -> None:
    zones = [
        Zone.from_dict(make_zone(0, 0, 100, 100)),
        Zone.from_dict(make_zone(300, 200, 250, 150, iterations=2)),
    ]

    await roborock_robot.get_capability(ZoneCleaningCapability).start(zones)

    assert fake_transport.commands == [
        ("app_zoned_clean", [[0, 0, 100, 100, 1], [250, 150, 300, 200, 2]])
    ]


def _wifi(ssid, password, credentials_type=WifiCredentialsType.WPA2_PSK):
    return WifiConfiguration(
        ssid=ssid,
        credentials=WifiCredentials(
            type=credentials_type,
            type_specific_settings={"password": password} if password else {},
        ),
    )


@pytest.mark.asyncio
async def test_set_wifi_configuration_sends_router_config(
    roborock_robot, fake_transport
) -> None:
    wifi = roborock_robot.get_capability(WifiConfigurationCapability)

    await wifi.set_wifi_configuration(_wifi("Home", "secret"))

    assert fake_transport.commands == [
        ("miIO.config_router", {"ssid": "Home", "passwd": "secret", "uid": 0})
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "configuration",
    [
        WifiConfiguration(ssid="Home"),
        WifiConfiguration(credentials=WifiCredentials(type=WifiCredentialsType.WPA2_PSK)),
        _wifi("Home", None),
        _wifi("", "secret"),
    ],
)
async def test_set_wifi_configuration_rejects_incomplete(
    roborock_robot, fake_transport, configuration
) -> None:
    wifi = roborock_robot.get_capability(WifiConfigurationCapability)

    with pytest.raises(InvalidArgumentError) as exc:
        await wifi.set_wifi_configuration(configuration)

    assert exc.value.message == "Invalid wifiConfig"
    assert fake_transport.commands == []


@pytest.mark.asyncio
async def test_get_wifi_configuration_connected(roborock_robot, fake_transport) -> None:
    fake_transport.responses["get_network_info"] = {
        "ssid": "Home",
        "ip": "192.168.1.5",
        "bssid": "aa:bb:cc:dd:ee:ff",
        "rssi": "-55",
    }

    configuration = await roborock_robot.get_capability(
        WifiConfigurationCapability
    ).get_wifi_configuration()

    assert configuration.ssid == "Home"
    assert configuration.details == WifiDetails(
        state=WifiState.CONNECTED,
        signal=-55,
        ips=["192.168.1.5"],
        frequency=WifiFrequency.W2_4GHZ,
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response, expected",
    [
        ("unknown_method", WifiState.UNKNOWN),
        ({"ssid": "Home"}, WifiState.NOT_CONNECTED),
        ({"bssid": ""}, WifiState.NOT_CONNECTED),
    ],
)
async def test_get_wifi_configuration_states(
    roborock_robot, fake_transport, response, expected
) -> None:
    fake_transport.responses["get_network_info"] = response

    configuration = await roborock_robot.get_capability(
        WifiConfigurationCapability
    ).get_wifi_configuration()

    assert configuration.details.state is expected
    assert configuration.ssid is None


@pytest.mark.asyncio
async def test_get_wifi_configuration_embedded_probes_locally(
    roborock_robot, config_store, fake_transport, monkeypatch
) -> None:
    await config_store.set("embedded", True)
    probed = WifiConfiguration(ssid="Local", details=WifiDetails(state=WifiState.CONNECTED))

    async def _fake_probe(interface: str) -> WifiConfiguration:
        assert interface == "wlan0"
        return probed

    monkeypatch.setattr(
        roborock_capabilities, "get_embedded_wireless_configuration", _fake_probe
    )

    configuration = await roborock_robot.get_capability(
        WifiConfigurationCapability
    ).get_wifi_configuration()

    assert configuration is probed
    assert fake_transport.commands == []
