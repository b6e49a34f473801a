"""
Device Transport Interface - Domain Layer

This module defines the interface used by robots and capabilities to send
commands to the physical device.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IDeviceTransport(ABC):
    """Interface for device command transports."""

    @abstractmethod
    async def send_command(self, method: str, params: Optional[Any] = None) -> Any:
        """
        Send a command to the device and wait for its answer.

        Args:
            method: Vendor command name (e.g. ``get_status``)
            params: Optional command parameters

        Returns:
            The command result as decoded from the device response

        Raises:
            DeviceTransportError: If the command could not be delivered
                or the device answered with an error
        """
        pass
