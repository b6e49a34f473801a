"""
Domain Entities - Zones

Zones are axis-aligned rectangles on the robot map, described by their four
corner points, plus the number of cleaning passes. Presets group zones under
a name and an identifier so they can be cleaned again later.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence
from uuid import uuid4


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Point":
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True)
class ZonePoints:
    """Corners of a zone, clockwise from the top left (pA) corner."""

    p_a: Point
    p_b: Point
    p_c: Point
    p_d: Point

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {
            "pA": self.p_a.to_dict(),
            "pB": self.p_b.to_dict(),
            "pC": self.p_c.to_dict(),
            "pD": self.p_d.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ZonePoints":
        return cls(
            p_a=Point.from_dict(data["pA"]),
            p_b=Point.from_dict(data["pB"]),
            p_c=Point.from_dict(data["pC"]),
            p_d=Point.from_dict(data["pD"]),
        )


@dataclass(frozen=True)
class Zone:
    points: ZonePoints
    iterations: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {"points": self.points.to_dict(), "iterations": self.iterations}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Zone":
        return cls(
            points=ZonePoints.from_dict(data["points"]),
            iterations=data.get("iterations", 1),
        )

    @classmethod
    def from_legacy_area(cls, area: Sequence[int]) -> "Zone":
        """Build a zone from the deprecated ``[x1, y1, x2, y2, iterations]`` form."""
        x1, y1, x2, y2, iterations = area
        return cls(
            points=ZonePoints(
                p_a=Point(x=x1, y=y1),
                p_b=Point(x=x2, y=y1),
                p_c=Point(x=x2, y=y2),
                p_d=Point(x=x1, y=y2),
            ),
            iterations=iterations,
        )

    def to_legacy_area(self) -> List[int]:
        return [
            self.points.p_a.x,
            self.points.p_a.y,
            self.points.p_c.x,
            self.points.p_c.y,
            self.iterations,
        ]


@dataclass
class ZonePreset:
    """A named, persisted collection of zones."""

    name: str
    zones: List[Zone]
    id: str = field(default_factory=lambda: str(uuid4()))

    @classmethod
    def create(
        cls, name: str, zones: List[Zone], preset_id: Optional[str] = None
    ) -> "ZonePreset":
        """Create a preset, generating an identifier unless one is given."""
        if preset_id:
            return cls(name=name, zones=zones, id=preset_id)
        return cls(name=name, zones=zones)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "zones": [zone.to_dict() for zone in self.zones],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ZonePreset":
        return cls(
            id=data["id"],
            name=data["name"],
            zones=[Zone.from_dict(zone) for zone in data.get("zones", [])],
        )
