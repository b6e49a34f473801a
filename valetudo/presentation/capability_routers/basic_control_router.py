"""Basic Control Router - Presentation Layer"""

from typing import Any

from fastapi import Body, HTTPException, Response, status

from valetudo.application.dtos.robot_dto import CapabilityActionDTO
from valetudo.domain.capabilities.basic_control import BasicControlCapability

from .base import CapabilityRouter


class BasicControlCapabilityRouter(CapabilityRouter):
    capability: BasicControlCapability

    def init_routes(self) -> None:
        operations = {
            "start": self.capability.start,
            "stop": self.capability.stop,
            "pause": self.capability.pause,
            "home": self.capability.home,
        }

        @self.router.put("/", summary="Start, stop, pause or send the robot home")
        async def basic_control(payload: Any = Body(default=None)) -> Response:
            request = self.parse_body(CapabilityActionDTO, payload)
            operation = operations.get(request.action)
            if operation is None:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f'Invalid action "{request.action}" in request body',
                )

            await self.run(
                operation(), "basic_control.action_failed", action=request.action
            )
            return Response(status_code=status.HTTP_200_OK)
