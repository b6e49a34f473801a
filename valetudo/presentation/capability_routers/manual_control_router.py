"""Manual Control Router - Presentation Layer"""

from typing import Any

from fastapi import Body, HTTPException, Response, status

from valetudo.application.dtos.robot_dto import ManualControlActionDTO
from valetudo.domain.capabilities.manual_control import (
    ManualControlCapability,
    MovementCommand,
)

from .base import CapabilityRouter


class ManualControlCapabilityRouter(CapabilityRouter):
    capability: ManualControlCapability

    def init_routes(self) -> None:
        @self.router.put("/", summary="Enable, disable or move in manual control")
        async def manual_control(payload: Any = Body(default=None)) -> Response:
            request = self.parse_body(ManualControlActionDTO, payload)

            if request.action == "enable":
                operation = self.capability.enter_manual_control()
            elif request.action == "disable":
                operation = self.capability.leave_manual_control()
            elif request.action == "move":
                try:
                    command = MovementCommand(request.movement_command)
                except ValueError:
                    raise HTTPException(
                        status_code=status.HTTP_400_BAD_REQUEST,
                        detail=f'Invalid movementCommand "{request.movement_command}"',
                    )
                operation = self.capability.manual_control(command)
            else:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f'Invalid action "{request.action}" in request body',
                )

            await self.run(
                operation, "manual_control.action_failed", action=request.action
            )
            return Response(status_code=status.HTTP_200_OK)
