"""
Domain Entities - Robot

The robot is the owner of everything a device family provides: the injected
configuration store, the transport used to talk to the device, the registry
of capabilities and the last known state.
"""

from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

from valetudo.domain.capabilities.base import Capability
from valetudo.domain.capabilities.registry import CapabilityRegistry
from valetudo.domain.entities.attributes import RobotState
from valetudo.domain.entities.errors import CapabilityNotImplementedError
from valetudo.domain.gateways.device_transport import IDeviceTransport
from valetudo.domain.repositories.config_store import IConfigStore

CapabilityT = TypeVar("CapabilityT", bound=Capability)


class Robot:
    """Base class for device families."""

    def __init__(self, config: IConfigStore, transport: IDeviceTransport):
        self.config = config
        self.transport = transport
        self.capabilities = CapabilityRegistry()
        self.state = RobotState()

    def get_manufacturer(self) -> str:
        return "Unknown"

    def get_model_name(self) -> str:
        return "Unknown"

    def register_capability(self, capability: Capability) -> None:
        self.capabilities.register(capability)

    def has_capability(self, capability_type: str) -> bool:
        return self.capabilities.has(capability_type)

    def get_capability(self, capability_cls: Type[CapabilityT]) -> Optional[CapabilityT]:
        """Return the registered implementation of a capability kind, if any."""
        capability = self.capabilities.get(capability_cls.TYPE)
        if isinstance(capability, capability_cls):
            return capability
        return None

    async def send_command(self, method: str, params: Optional[Any] = None) -> Any:
        return await self.transport.send_command(method, params)

    async def poll_state(self) -> RobotState:
        """Refresh ``state`` from the device and return it."""
        raise CapabilityNotImplementedError("Robot", "poll_state")
