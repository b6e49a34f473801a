"""
Zone Preset Use Cases - Application Layer

This module implements the rules for storing zone presets in the
configuration store and for turning presets back into zones to clean.
Presets live under a single key as a mapping of preset ID to preset.
"""

from typing import Any, Dict, List

from valetudo.application.dtos.zone_dto import ZonePresetCreateDTO
from valetudo.domain.entities.errors import ZonePresetNotFoundError
from valetudo.domain.entities.zone import Zone, ZonePreset
from valetudo.domain.repositories.config_store import IConfigStore
from valetudo.shared import ZONE_PRESETS_CONFIG_KEY, get_logger

logger = get_logger(__name__)


class ZonePresetUseCases:
    """Use cases for zone preset CRUD and resolution."""

    def __init__(self, config_store: IConfigStore):
        self.config_store = config_store

    async def _load(self) -> Dict[str, Any]:
        return await self.config_store.get(ZONE_PRESETS_CONFIG_KEY) or {}

    async def _save(self, presets: Dict[str, Any]) -> None:
        await self.config_store.set(ZONE_PRESETS_CONFIG_KEY, presets)

    async def list_presets(self) -> Dict[str, Any]:
        """Return the stored preset mapping as-is."""
        return await self._load()

    async def get_preset(self, preset_id: str) -> Dict[str, Any]:
        presets = await self._load()
        if preset_id not in presets:
            raise ZonePresetNotFoundError(preset_id)
        return presets[preset_id]

    async def create_preset(self, preset_dto: ZonePresetCreateDTO) -> Dict[str, Any]:
        """
        Store a new preset.

        An existing preset with the same ID is overwritten.
        """
        presets = await self._load()
        preset = preset_dto.to_entity()

        if preset.id in presets:
            logger.info("zone_presets.overwritten", preset_id=preset.id)

        presets[preset.id] = preset.to_dict()
        await self._save(presets)

        logger.info("zone_presets.created", preset_id=preset.id, zones=len(preset.zones))
        return presets[preset.id]

    async def update_preset(
        self, preset_id: str, preset_dto: ZonePresetCreateDTO
    ) -> Dict[str, Any]:
        """Replace name and zones of an existing preset; the ID stays fixed."""
        presets = await self._load()
        if preset_id not in presets:
            raise ZonePresetNotFoundError(preset_id)

        preset = preset_dto.to_entity(preset_id=preset_id)
        presets[preset_id] = preset.to_dict()
        await self._save(presets)

        logger.info("zone_presets.updated", preset_id=preset_id)
        return presets[preset_id]

    async def delete_preset(self, preset_id: str) -> None:
        presets = await self._load()
        if preset_id not in presets:
            raise ZonePresetNotFoundError(preset_id)

        del presets[preset_id]
        await self._save(presets)

        logger.info("zone_presets.deleted", preset_id=preset_id)

    async def resolve_zones(self, preset_ids: List[str]) -> List[Zone]:
        """
        Concatenate the zones of several presets in request order.

        Every ID is resolved before anything is returned, so a single
        unknown ID fails the whole request. Zones shared by two presets are
        not deduplicated.

        Raises:
            ZonePresetNotFoundError: For the first unknown ID
        """
        presets = await self._load()

        loaded: List[ZonePreset] = []
        for preset_id in preset_ids:
            if preset_id not in presets:
                raise ZonePresetNotFoundError(preset_id)
            loaded.append(ZonePreset.from_dict(presets[preset_id]))

        return [zone for preset in loaded for zone in preset.zones]

    async def list_legacy(self) -> List[Dict[str, Any]]:
        presets = await self._load()
        result = []
        for data in presets.values():
            preset = ZonePreset.from_dict(data)
            result.append(
                {
                    "name": preset.name,
                    "id": preset.id,
                    "areas": [zone.to_legacy_area() for zone in preset.zones],
                }
            )
        return result

    async def replace_all(self, new_presets: List[ZonePreset]) -> Dict[str, Any]:
        """Replace the whole preset mapping, as done by the legacy import."""
        presets = {preset.id: preset.to_dict() for preset in new_presets}
        await self._save(presets)

        logger.info("zone_presets.replaced", count=len(presets))
        return presets
