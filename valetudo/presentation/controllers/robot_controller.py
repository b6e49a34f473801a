"""
Robot Router - Presentation Layer

This module defines the FastAPI router describing the robot itself: its
identity, the capabilities it registered and its current state.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from valetudo.application.dtos.robot_dto import RobotInfoDTO, RobotStateDTO
from valetudo.application.use_cases.robot_use_cases import (
    GetRobotInfoUseCase,
    GetRobotStateUseCase,
)
from valetudo.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v2/robot", tags=["Robot"])


@router.get("", response_model=RobotInfoDTO, response_model_by_alias=True)
@inject
async def get_robot(
    get_robot_info_use_case: GetRobotInfoUseCase = Depends(
        Provide["get_robot_info_use_case"]
    ),
) -> RobotInfoDTO:
    """Return manufacturer, model and registered capability types."""
    return await get_robot_info_use_case.execute()


@router.get("/capabilities", response_model=List[str])
@inject
async def get_capabilities(
    get_robot_info_use_case: GetRobotInfoUseCase = Depends(
        Provide["get_robot_info_use_case"]
    ),
) -> List[str]:
    """Return the registered capability types in registration order."""
    robot_info = await get_robot_info_use_case.execute()
    return robot_info.capabilities


@router.get("/state", response_model=RobotStateDTO)
@inject
async def get_state(
    get_robot_state_use_case: GetRobotStateUseCase = Depends(
        Provide["get_robot_state_use_case"]
    ),
) -> RobotStateDTO:
    """
    Poll the robot and return its attributes.

    Raises:
        HTTPException: 500 if the device could not be polled
    """
    try:
        return await get_robot_state_use_case.execute()
    except Exception as e:
        logger.error("robot.state.poll_failed", error=str(e), exc_info=e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        ) from e
