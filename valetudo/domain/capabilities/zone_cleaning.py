"""Clean one or more rectangular zones."""

from typing import List

from valetudo.domain.capabilities.base import Capability
from valetudo.domain.entities.zone import Zone


class ZoneCleaningCapability(Capability):
    TYPE = "ZoneCleaningCapability"

    async def start(self, zones: List[Zone]) -> None:
        """Start a single cleaning job covering ``zones`` in the given order."""
        raise self._not_implemented("start")

    def get_type(self) -> str:
        return ZoneCleaningCapability.TYPE
