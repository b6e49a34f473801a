"""Locate Router - Presentation Layer"""

from typing import Any

from fastapi import Body, HTTPException, Response, status

from valetudo.application.dtos.robot_dto import CapabilityActionDTO
from valetudo.domain.capabilities.locate import LocateCapability

from .base import CapabilityRouter


class LocateCapabilityRouter(CapabilityRouter):
    capability: LocateCapability

    def init_routes(self) -> None:
        @self.router.put("/", summary="Locate the robot")
        async def locate(payload: Any = Body(default=None)) -> Response:
            request = self.parse_body(CapabilityActionDTO, payload)
            if request.action != "locate":
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f'Invalid action "{request.action}" in request body',
                )

            await self.run(self.capability.locate(), "locate.failed")
            return Response(status_code=status.HTTP_200_OK)
