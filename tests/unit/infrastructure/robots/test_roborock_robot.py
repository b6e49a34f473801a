from __future__ import annotations

import pytest

from valetudo.domain.capabilities import ZoneCleaningCapability
from valetudo.domain.entities.attributes import (
    AttributeClass,
    BatteryFlag,
    BatteryStateAttribute,
    PresetSelectionStateAttribute,
    PresetValue,
    StatusFlag,
    StatusStateAttribute,
    StatusValue,
)
from valetudo.domain.entities.errors import (
    CapabilityRegistrationError,
    DeviceTransportError,
)


def test_registers_capabilities_once(roborock_robot) -> None:
    assert len(roborock_robot.capabilities) == 5
    assert roborock_robot.get_manufacturer() == "Roborock"
    assert roborock_robot.get_model_name() == "S5"

    with pytest.raises(CapabilityRegistrationError):
        roborock_robot.register_capability(ZoneCleaningCapability(robot=roborock_robot))


def test_parse_status_upserts_attributes(roborock_robot) -> None:
    roborock_robot.parse_status({"state": 17, "battery": 64, "fan_power": 102})

    state = roborock_robot.state
    status = state.get_first_matching_of(StatusStateAttribute)
    battery = state.get_first_matching_of(BatteryStateAttribute)
    fan = state.get_first_matching_of(PresetSelectionStateAttribute)

    assert status.value is StatusValue.CLEANING
    assert status.flag is StatusFlag.ZONE
    assert battery.level == 64
    assert battery.flag is BatteryFlag.DISCHARGING
    assert fan.value is PresetValue.MEDIUM
    assert fan.custom_value is None


def test_parse_status_updates_in_place(roborock_robot) -> None:
    roborock_robot.parse_status({"state": 5, "battery": 50, "fan_power": 103})
    roborock_robot.parse_status({"state": 8, "battery": 100, "fan_power": 77})

    state = roborock_robot.state
    assert [attribute.attribute_class for attribute in state.attributes] == [
        AttributeClass.STATUS_STATE,
        AttributeClass.BATTERY_STATE,
        AttributeClass.PRESET_SELECTION_STATE,
    ]
    assert state.attributes[0].value is StatusValue.DOCKED
    assert state.attributes[1].flag is BatteryFlag.CHARGED
    assert state.attributes[2].value is PresetValue.CUSTOM
    assert state.attributes[2].custom_value == 77


def test_parse_status_reports_error_code(roborock_robot) -> None:
    roborock_robot.parse_status({"state": 12, "error_code": 3})

    status = roborock_robot.state.get_first_matching_of(StatusStateAttribute)
    assert status.value is StatusValue.ERROR
    assert status.error_description == "Error code 3"


@pytest.mark.asyncio
async def test_poll_state_unwraps_list_response(roborock_robot, fake_transport) -> None:
    fake_transport.responses["get_status"] = [{"state": 8, "battery": 90}]

    state = await roborock_robot.poll_state()

    assert state is roborock_robot.state
    battery = state.get_first_matching_of(BatteryStateAttribute)
    assert battery.flag is BatteryFlag.CHARGING


@pytest.mark.asyncio
async def test_poll_state_rejects_unexpected_response(
    roborock_robot, fake_transport
) -> None:
    fake_transport.responses["get_status"] = "ok"

    with pytest.raises(DeviceTransportError):
        await roborock_robot.poll_state()
