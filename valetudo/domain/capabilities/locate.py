"""Make the robot announce its position."""

from valetudo.domain.capabilities.base import Capability


class LocateCapability(Capability):
    TYPE = "LocateCapability"

    async def locate(self) -> None:
        raise self._not_implemented("locate")

    def get_type(self) -> str:
        return LocateCapability.TYPE
