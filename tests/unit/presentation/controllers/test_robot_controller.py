from __future__ import annotations

import pytest
from fastapi import HTTPException

from valetudo.application.dtos.robot_dto import RobotStateDTO
from valetudo.application.use_cases.robot_use_cases import (
    GetRobotInfoUseCase,
    GetRobotStateUseCase,
)
from valetudo.presentation.controllers.robot_controller import (
    get_capabilities,
    get_robot,
    get_state,
)


@pytest.mark.asyncio
async def test_get_robot_returns_summary(roborock_robot) -> None:
    dto = await get_robot(get_robot_info_use_case=GetRobotInfoUseCase(robot=roborock_robot))

    assert dto.manufacturer == "Roborock"
    assert dto.model_name == "S5"


@pytest.mark.asyncio
async def test_get_capabilities_lists_types(roborock_robot) -> None:
    capabilities = await get_capabilities(
        get_robot_info_use_case=GetRobotInfoUseCase(robot=roborock_robot)
    )

    assert capabilities == roborock_robot.capabilities.types()


@pytest.mark.asyncio
async def test_get_state_returns_attributes(roborock_robot, fake_transport) -> None:
    fake_transport.responses["get_status"] = {"state": 8, "battery": 100}

    dto = await get_state(
        get_robot_state_use_case=GetRobotStateUseCase(robot=roborock_robot)
    )

    assert isinstance(dto, RobotStateDTO)
    assert dto.attributes[1]["level"] == 100


@pytest.mark.asyncio
async def test_get_state_handles_errors(roborock_robot) -> None:
    class _Fail(GetRobotStateUseCase):
        async def execute(self) -> RobotStateDTO:
            raise RuntimeError("failure")

    with pytest.raises(HTTPException) as exc:
        await get_state(get_robot_state_use_case=_Fail(robot=roborock_robot))
    assert exc.value.status_code == 500
    assert exc.value.detail == "failure"
