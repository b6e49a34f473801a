"""
Domain Entities - Attributes

Robot state is modelled as a container of small tagged values. Each
attribute variant declares its kind through an explicit ``AttributeClass``
tag; together with the optional ``type`` and ``sub_type`` discriminators it
forms the attribute's identity inside a container.

Attributes are frozen: drivers build a new attribute whenever they observe
fresh state and hand it to ``AttributeContainer.upsert_first_matching``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, List, Optional, Type, TypeVar, Union


class AttributeClass(str, Enum):
    """Closed set of attribute kinds."""

    STATUS_STATE = "StatusStateAttribute"
    BATTERY_STATE = "BatteryStateAttribute"
    CONSUMABLE_STATE = "ConsumableStateAttribute"
    PRESET_SELECTION_STATE = "PresetSelectionStateAttribute"
    ATTACHMENT_STATE = "AttachmentStateAttribute"


def _camel_case(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


@dataclass(frozen=True, kw_only=True)
class Attribute:
    """Base class of every attribute variant."""

    attribute_class: ClassVar[AttributeClass]

    type: Optional[str] = None
    sub_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"__class": self.attribute_class.value}
        for attribute_field in fields(self):
            value = getattr(self, attribute_field.name)
            if isinstance(value, Enum):
                value = value.value
            data[_camel_case(attribute_field.name)] = value
        return data


class StatusValue(str, Enum):
    ERROR = "error"
    DOCKED = "docked"
    IDLE = "idle"
    RETURNING = "returning"
    CLEANING = "cleaning"
    PAUSED = "paused"
    MANUAL_CONTROL = "manual_control"
    MOVING = "moving"


class StatusFlag(str, Enum):
    NONE = "none"
    ZONE = "zone"
    SEGMENT = "segment"
    SPOT = "spot"
    TARGET = "target"
    RESUMABLE = "resumable"


@dataclass(frozen=True, kw_only=True)
class StatusStateAttribute(Attribute):
    attribute_class: ClassVar[AttributeClass] = AttributeClass.STATUS_STATE

    value: StatusValue
    flag: StatusFlag = StatusFlag.NONE
    error_description: Optional[str] = None


class BatteryFlag(str, Enum):
    NONE = "none"
    CHARGING = "charging"
    DISCHARGING = "discharging"
    CHARGED = "charged"


@dataclass(frozen=True, kw_only=True)
class BatteryStateAttribute(Attribute):
    attribute_class: ClassVar[AttributeClass] = AttributeClass.BATTERY_STATE

    level: int
    flag: BatteryFlag = BatteryFlag.NONE


class ConsumableType(str, Enum):
    BRUSH = "brush"
    FILTER = "filter"
    SENSOR = "sensor"


class ConsumableSubType(str, Enum):
    NONE = "none"
    ALL = "all"
    MAIN = "main"
    SIDE_RIGHT = "side_right"
    SIDE_LEFT = "side_left"


class ConsumableUnit(str, Enum):
    MINUTES = "minutes"
    PERCENT = "percent"


@dataclass(frozen=True, kw_only=True)
class ConsumableStateAttribute(Attribute):
    attribute_class: ClassVar[AttributeClass] = AttributeClass.CONSUMABLE_STATE

    type: ConsumableType
    sub_type: ConsumableSubType = ConsumableSubType.NONE
    remaining_value: int
    remaining_unit: ConsumableUnit = ConsumableUnit.PERCENT


class PresetType(str, Enum):
    FAN_SPEED = "fan_speed"
    WATER_GRADE = "water_grade"


class PresetValue(str, Enum):
    OFF = "off"
    MIN = "min"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    MAX = "max"
    CUSTOM = "custom"


@dataclass(frozen=True, kw_only=True)
class PresetSelectionStateAttribute(Attribute):
    attribute_class: ClassVar[AttributeClass] = AttributeClass.PRESET_SELECTION_STATE

    type: PresetType
    value: PresetValue
    custom_value: Optional[int] = None


class AttachmentType(str, Enum):
    DUSTBIN = "dustbin"
    WATERTANK = "watertank"
    MOP = "mop"


@dataclass(frozen=True, kw_only=True)
class AttachmentStateAttribute(Attribute):
    attribute_class: ClassVar[AttributeClass] = AttributeClass.ATTACHMENT_STATE

    type: AttachmentType
    attached: bool


AttributeT = TypeVar("AttributeT", bound=Attribute)
ClassTag = Union[AttributeClass, str]


class AttributeContainer:
    """
    Ordered collection of attributes with identity based lookup.

    All lookups narrow progressively: the class tag is always applied, the
    ``type`` filter only when given, and the ``sub_type`` filter only when
    both ``type`` and ``sub_type`` are given. Omitted filters match anything.
    """

    def __init__(
        self,
        attributes: Optional[Iterable[Attribute]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self.attributes: List[Attribute] = list(attributes or [])
        self.metadata: Dict[str, Any] = dict(metadata or {})

    @staticmethod
    def _matches(
        attribute: Attribute,
        attribute_class: ClassTag,
        type: Optional[str],
        sub_type: Optional[str],
    ) -> bool:
        if attribute.attribute_class != attribute_class:
            return False
        if type is None:
            return True
        if attribute.type != type:
            return False
        return sub_type is None or attribute.sub_type == sub_type

    def has_matching(
        self,
        attribute_class: ClassTag,
        type: Optional[str] = None,
        sub_type: Optional[str] = None,
    ) -> bool:
        return len(self.get_matching(attribute_class, type, sub_type)) > 0

    def get_matching(
        self,
        attribute_class: ClassTag,
        type: Optional[str] = None,
        sub_type: Optional[str] = None,
    ) -> List[Attribute]:
        """Return every matching attribute, in container order."""
        return [
            attribute
            for attribute in self.attributes
            if self._matches(attribute, attribute_class, type, sub_type)
        ]

    def remove_matching(
        self,
        attribute_class: ClassTag,
        type: Optional[str] = None,
        sub_type: Optional[str] = None,
    ) -> None:
        # Removal is by object identity; equal-valued attributes that do not
        # match the filter stay in place.
        needles = {
            id(attribute)
            for attribute in self.get_matching(attribute_class, type, sub_type)
        }
        self.attributes = [
            attribute for attribute in self.attributes if id(attribute) not in needles
        ]

    def get_first_matching(
        self,
        attribute_class: ClassTag,
        type: Optional[str] = None,
        sub_type: Optional[str] = None,
    ) -> Optional[Attribute]:
        index = self.get_first_matching_index(attribute_class, type, sub_type)
        if index == -1:
            return None
        return self.attributes[index]

    def get_first_matching_of(
        self, attribute_type: Type[AttributeT]
    ) -> Optional[AttributeT]:
        """Return the first attribute of the given variant, if any."""
        attribute = self.get_first_matching(attribute_type.attribute_class)
        return attribute  # type: ignore[return-value]

    def get_first_matching_index(
        self,
        attribute_class: ClassTag,
        type: Optional[str] = None,
        sub_type: Optional[str] = None,
    ) -> int:
        """Return the index of the first match, or -1 when nothing matches."""
        for index, attribute in enumerate(self.attributes):
            if self._matches(attribute, attribute_class, type, sub_type):
                return index
        return -1

    def upsert_first_matching(self, attribute: Attribute) -> None:
        """
        Replace the first attribute sharing the new attribute's identity.

        The identity filters come from ``attribute`` itself. A replaced
        attribute keeps its position; an attribute without a match is
        appended.
        """
        index = self.get_first_matching_index(
            attribute.attribute_class, attribute.type, attribute.sub_type
        )
        if index == -1:
            self.attributes.append(attribute)
        else:
            self.attributes[index] = attribute

    def to_dict(self) -> Dict[str, Any]:
        return {
            "__class": type(self).__name__,
            "attributes": [attribute.to_dict() for attribute in self.attributes],
            "metadata": dict(self.metadata),
        }


class RobotState(AttributeContainer):
    """Snapshot of the state last reported by a robot."""
