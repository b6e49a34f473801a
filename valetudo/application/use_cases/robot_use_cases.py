"""
Robot Use Cases - Application Layer

This module defines use cases describing the robot: its identity, the
capabilities it registered and its current state.
"""

from dependency_injector.wiring import Provide, inject

from valetudo.application.dtos.robot_dto import RobotInfoDTO, RobotStateDTO
from valetudo.domain.entities.errors import CapabilityNotImplementedError
from valetudo.domain.entities.robot import Robot
from valetudo.shared import get_logger

logger = get_logger(__name__)


class GetRobotInfoUseCase:
    """Use case for summarizing the robot and its capabilities."""

    @inject
    def __init__(self, robot: Robot = Provide["robot"]):
        self.robot = robot

    async def execute(self) -> RobotInfoDTO:
        return RobotInfoDTO(
            manufacturer=self.robot.get_manufacturer(),
            model_name=self.robot.get_model_name(),
            capabilities=self.robot.capabilities.types(),
        )


class GetRobotStateUseCase:
    """Use case for refreshing and returning the robot state."""

    @inject
    def __init__(self, robot: Robot = Provide["robot"]):
        self.robot = robot

    async def execute(self) -> RobotStateDTO:
        """
        Poll the robot and return its state.

        Robots that cannot be polled report the last state they stored.

        Raises:
            Exception: If polling the device fails
        """
        try:
            state = await self.robot.poll_state()
        except CapabilityNotImplementedError:
            logger.debug("robot.state.poll_not_implemented")
            state = self.robot.state

        data = state.to_dict()
        return RobotStateDTO(attributes=data["attributes"], metadata=data["metadata"])
