"""Start, stop, pause and send the robot home."""

from valetudo.domain.capabilities.base import Capability


class BasicControlCapability(Capability):
    TYPE = "BasicControlCapability"

    async def start(self) -> None:
        raise self._not_implemented("start")

    async def stop(self) -> None:
        raise self._not_implemented("stop")

    async def pause(self) -> None:
        raise self._not_implemented("pause")

    async def home(self) -> None:
        raise self._not_implemented("home")

    def get_type(self) -> str:
        return BasicControlCapability.TYPE
