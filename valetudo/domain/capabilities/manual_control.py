"""Drive the robot by hand."""

from enum import Enum

from valetudo.domain.capabilities.base import Capability


class MovementCommand(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    ROTATE_CLOCKWISE = "rotate_clockwise"
    ROTATE_COUNTERCLOCKWISE = "rotate_counterclockwise"


class ManualControlCapability(Capability):
    TYPE = "ManualControlCapability"

    async def enter_manual_control(self) -> None:
        raise self._not_implemented("enter_manual_control")

    async def leave_manual_control(self) -> None:
        raise self._not_implemented("leave_manual_control")

    async def manual_control(self, action: MovementCommand) -> None:
        raise self._not_implemented("manual_control")

    def get_type(self) -> str:
        return ManualControlCapability.TYPE
