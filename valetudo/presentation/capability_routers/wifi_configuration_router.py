"""Wifi Configuration Router - Presentation Layer"""

from typing import Any

from fastapi import Body, Response, status

from valetudo.application.dtos.wifi_dto import (
    WifiConfigurationDTO,
    WifiConfigurationUpdateDTO,
)
from valetudo.domain.capabilities.wifi_configuration import (
    WifiConfigurationCapability,
)

from .base import CapabilityRouter


class WifiConfigurationCapabilityRouter(CapabilityRouter):
    capability: WifiConfigurationCapability

    def init_routes(self) -> None:
        @self.router.get(
            "/",
            response_model=WifiConfigurationDTO,
            summary="Get the current wifi configuration",
        )
        async def get_wifi_configuration() -> WifiConfigurationDTO:
            configuration = await self.run(
                self.capability.get_wifi_configuration(),
                "wifi_configuration.get_failed",
            )
            return WifiConfigurationDTO.from_entity(configuration)

        @self.router.put("/", summary="Join a wifi network")
        async def set_wifi_configuration(payload: Any = Body(default=None)) -> Response:
            request = self.parse_body(WifiConfigurationUpdateDTO, payload)
            await self.run(
                self.capability.set_wifi_configuration(request.to_entity()),
                "wifi_configuration.set_failed",
                ssid=request.ssid,
            )
            return Response(status_code=status.HTTP_200_OK)
