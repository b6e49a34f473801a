"""
Zone DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for zones and zone presets.
Field aliases follow the wire format (``pA``..``pD``); DTOs accept both the
alias and the attribute name.
"""

from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from valetudo.domain.entities.zone import Point, Zone, ZonePoints, ZonePreset


class PointDTO(BaseModel):
    """DTO for a map coordinate."""

    x: int = Field(description="X coordinate in map units")
    y: int = Field(description="Y coordinate in map units")


class ZonePointsDTO(BaseModel):
    """DTO for the four corners of a zone."""

    model_config = ConfigDict(populate_by_name=True)

    p_a: PointDTO = Field(alias="pA", description="Top left corner")
    p_b: PointDTO = Field(alias="pB", description="Top right corner")
    p_c: PointDTO = Field(alias="pC", description="Bottom right corner")
    p_d: PointDTO = Field(alias="pD", description="Bottom left corner")


class ZoneDTO(BaseModel):
    """DTO for a zone to clean."""

    points: ZonePointsDTO = Field(description="Corners of the zone")
    iterations: int = Field(default=1, ge=1, description="Number of cleaning passes")

    model_config = {
        "json_schema_extra": {
            "example": {
                "points": {
                    "pA": {"x": 0, "y": 0},
                    "pB": {"x": 100, "y": 0},
                    "pC": {"x": 100, "y": 100},
                    "pD": {"x": 0, "y": 100},
                },
                "iterations": 1,
            }
        }
    }

    def to_entity(self) -> Zone:
        return Zone(
            points=ZonePoints(
                p_a=Point(x=self.points.p_a.x, y=self.points.p_a.y),
                p_b=Point(x=self.points.p_b.x, y=self.points.p_b.y),
                p_c=Point(x=self.points.p_c.x, y=self.points.p_c.y),
                p_d=Point(x=self.points.p_d.x, y=self.points.p_d.y),
            ),
            iterations=self.iterations,
        )


class ZonePresetCreateDTO(BaseModel):
    """DTO for creating a zone preset."""

    name: str = Field(min_length=1, description="Display name of the preset")
    id: Optional[str] = Field(
        default=None, description="Preset ID; generated when omitted"
    )
    zones: List[ZoneDTO] = Field(min_length=1, description="Zones of the preset")

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Kitchen",
                "zones": [
                    {
                        "points": {
                            "pA": {"x": 0, "y": 0},
                            "pB": {"x": 100, "y": 0},
                            "pC": {"x": 100, "y": 100},
                            "pD": {"x": 0, "y": 100},
                        },
                        "iterations": 1,
                    }
                ],
            }
        }
    }

    def to_entity(self, preset_id: Optional[str] = None) -> ZonePreset:
        return ZonePreset.create(
            name=self.name,
            zones=[zone.to_entity() for zone in self.zones],
            preset_id=preset_id or self.id,
        )


class PresetsCleanRequestDTO(BaseModel):
    """DTO for cleaning one or more stored presets."""

    action: str = Field(description="Must be 'clean'")
    ids: List[str] = Field(min_length=1, description="IDs of the presets to clean")


class ZonesCleanRequestDTO(BaseModel):
    """DTO for cleaning zones given inline."""

    action: str = Field(description="Must be 'clean'")
    zones: List[ZoneDTO] = Field(description="Zones to clean")


def _check_legacy_iterations(area: List[int]) -> List[int]:
    if area[4] < 1:
        raise ValueError("iterations must be at least 1")
    return area


LegacyArea = Annotated[
    List[int],
    Field(min_length=5, max_length=5),
    AfterValidator(_check_legacy_iterations),
]


class LegacyZonePresetDTO(BaseModel):
    """
    DTO for the deprecated array encoding of presets.

    Each area is ``[x1, y1, x2, y2, iterations]``.
    """

    name: str = Field(min_length=1)
    id: Optional[str] = None
    areas: List[LegacyArea] = Field(min_length=1, description="Legacy area arrays")

    def to_entity(self) -> ZonePreset:
        return ZonePreset.create(
            name=self.name,
            zones=[Zone.from_legacy_area(area) for area in self.areas],
            preset_id=self.id,
        )
