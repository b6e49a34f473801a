"""
Capability Registry - Domain Layer

Per-robot mapping from capability type tag to its single instance. It is
filled while the robot is initialized; afterwards presence in the registry
is the only signal that the robot supports a capability.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from valetudo.domain.capabilities.base import Capability
from valetudo.domain.entities.errors import CapabilityRegistrationError


class CapabilityRegistry:
    """Registration-ordered mapping of type tag to capability."""

    def __init__(self) -> None:
        self._capabilities: Dict[str, Capability] = {}

    def register(self, capability: Capability) -> None:
        capability_type = capability.get_type()
        if capability_type in self._capabilities:
            raise CapabilityRegistrationError(capability_type)
        self._capabilities[capability_type] = capability

    def get(self, capability_type: str) -> Optional[Capability]:
        return self._capabilities.get(capability_type)

    def has(self, capability_type: str) -> bool:
        return capability_type in self._capabilities

    def types(self) -> List[str]:
        return list(self._capabilities)

    def __contains__(self, capability_type: object) -> bool:
        return capability_type in self._capabilities

    def __iter__(self) -> Iterator[Capability]:
        return iter(list(self._capabilities.values()))

    def __len__(self) -> int:
        return len(self._capabilities)
