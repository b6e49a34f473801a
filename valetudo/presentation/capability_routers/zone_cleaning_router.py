"""
Zone Cleaning Router - Presentation Layer

Routes of the zone cleaning capability: stored zone presets (CRUD and
cleaning by ID), the deprecated array-encoded preset routes, and cleaning of
zones given inline.
"""

from typing import Any, Dict, List

from fastapi import Body, HTTPException, Response, status
from pydantic import TypeAdapter, ValidationError

from valetudo.application.dtos.zone_dto import (
    LegacyZonePresetDTO,
    PresetsCleanRequestDTO,
    ZonePresetCreateDTO,
    ZonesCleanRequestDTO,
)
from valetudo.application.use_cases.zone_preset_use_cases import ZonePresetUseCases
from valetudo.domain.capabilities.zone_cleaning import ZoneCleaningCapability
from valetudo.domain.repositories.config_store import IConfigStore

from .base import CapabilityRouter

_legacy_presets_adapter = TypeAdapter(List[LegacyZonePresetDTO])


class ZoneCleaningCapabilityRouter(CapabilityRouter):
    capability: ZoneCleaningCapability

    def __init__(self, capability: ZoneCleaningCapability, config_store: IConfigStore):
        self.presets = ZonePresetUseCases(config_store)
        super().__init__(capability, config_store)

    def init_routes(self) -> None:
        router = self.router

        @router.get("/presets", summary="Get available zone presets")
        async def get_presets() -> Dict[str, Any]:
            return await self.run(
                self.presets.list_presets(), "zone_presets.list_failed"
            )

        @router.put("/presets", summary="Clean one or more zone presets")
        async def clean_presets(payload: Any = Body(default=None)) -> Response:
            if not isinstance(payload, dict) or payload.get("action") != "clean":
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

            request = self.parse_body(PresetsCleanRequestDTO, payload)

            # All IDs are resolved before the robot is asked to do anything.
            zones = await self.run(
                self.presets.resolve_zones(request.ids),
                "zone_presets.resolve_failed",
                not_found_status=status.HTTP_400_BAD_REQUEST,
            )
            await self.run(
                self.capability.start(zones),
                "zone_cleaning.presets_start_failed",
                preset_ids=request.ids,
            )
            return Response(status_code=status.HTTP_200_OK)

        @router.get("/presets_legacy", summary="Get zone presets (deprecated)")
        async def get_legacy_presets() -> List[Dict[str, Any]]:
            return await self.run(
                self.presets.list_legacy(), "zone_presets.legacy_list_failed"
            )

        @router.post(
            "/presets_legacy",
            status_code=status.HTTP_201_CREATED,
            summary="Replace all zone presets (deprecated)",
        )
        async def replace_legacy_presets(payload: Any = Body(default=None)) -> Response:
            if not isinstance(payload, list):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Expected an array of presets",
                )
            try:
                new_presets = [
                    preset.to_entity()
                    for preset in _legacy_presets_adapter.validate_python(payload)
                ]
            except ValidationError as e:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=[
                        {"loc": list(error["loc"]), "msg": error["msg"]}
                        for error in e.errors()
                    ],
                )

            await self.run(
                self.presets.replace_all(new_presets), "zone_presets.legacy_import_failed"
            )
            return Response(status_code=status.HTTP_201_CREATED)

        @router.get("/presets/{preset_id}", summary="Get zone preset by ID")
        async def get_preset(preset_id: str) -> Dict[str, Any]:
            return await self.run(
                self.presets.get_preset(preset_id),
                "zone_presets.get_failed",
                preset_id=preset_id,
            )

        @router.put("/presets/{preset_id}", summary="Clean zone preset by ID")
        async def clean_preset(
            preset_id: str, payload: Any = Body(default=None)
        ) -> Response:
            zones = await self.run(
                self.presets.resolve_zones([preset_id]),
                "zone_presets.resolve_failed",
                preset_id=preset_id,
            )
            if not isinstance(payload, dict) or payload.get("action") != "clean":
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

            await self.run(
                self.capability.start(zones),
                "zone_cleaning.preset_start_failed",
                preset_id=preset_id,
            )
            return Response(status_code=status.HTTP_200_OK)

        @router.delete("/presets/{preset_id}", summary="Delete zone preset by ID")
        async def delete_preset(preset_id: str) -> Response:
            await self.run(
                self.presets.delete_preset(preset_id),
                "zone_presets.delete_failed",
                preset_id=preset_id,
            )
            return Response(status_code=status.HTTP_200_OK)

        @router.post(
            "/presets",
            status_code=status.HTTP_201_CREATED,
            summary="Add new preset",
        )
        async def create_preset(payload: Any = Body(default=None)) -> Dict[str, Any]:
            preset_dto = self.parse_body(ZonePresetCreateDTO, payload)
            return await self.run(
                self.presets.create_preset(preset_dto), "zone_presets.create_failed"
            )

        @router.post("/presets/{preset_id}", summary="Edit existing preset by ID")
        async def update_preset(
            preset_id: str, payload: Any = Body(default=None)
        ) -> Dict[str, Any]:
            await self.run(
                self.presets.get_preset(preset_id),
                "zone_presets.get_failed",
                preset_id=preset_id,
            )
            preset_dto = self.parse_body(ZonePresetCreateDTO, payload)
            return await self.run(
                self.presets.update_preset(preset_id, preset_dto),
                "zone_presets.update_failed",
                preset_id=preset_id,
            )

        @router.put("/", summary="Clean one or more zones")
        async def clean_zones(payload: Any = Body(default=None)) -> Response:
            if not isinstance(payload, dict) or not payload.get("action"):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Missing action in request body",
                )
            if payload["action"] != "clean" or not isinstance(payload.get("zones"), list):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f'Invalid action "{payload["action"]}" in request body',
                )
            if any(
                not isinstance(zone, dict) or not zone.get("points")
                for zone in payload["zones"]
            ):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid Zone"
                )

            request = self.parse_body(ZonesCleanRequestDTO, payload)
            await self.run(
                self.capability.start([zone.to_entity() for zone in request.zones]),
                "zone_cleaning.start_failed",
                zones=len(request.zones),
            )
            return Response(status_code=status.HTTP_200_OK)
