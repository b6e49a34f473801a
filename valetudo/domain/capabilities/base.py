"""
Capability Contract - Domain Layer

A capability is an optional robot behaviour with a fixed type tag. Every
capability kind is an abstract contract whose operations raise
``CapabilityNotImplementedError`` by default; device families subclass the
contract and override only the operations they actually support.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from valetudo.domain.entities.errors import CapabilityNotImplementedError

if TYPE_CHECKING:
    from valetudo.domain.entities.robot import Robot


class Capability(ABC):
    """Base class of every capability contract."""

    TYPE: ClassVar[str]

    def __init__(self, robot: "Robot"):
        self.robot = robot

    @abstractmethod
    def get_type(self) -> str:
        """Return the type tag of the capability kind."""
        pass

    def _not_implemented(self, operation: str) -> CapabilityNotImplementedError:
        return CapabilityNotImplementedError(self.get_type(), operation)
