"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the gateway
interfaces defined in the domain layer. These implementations
handle the details of talking to the device and the host system.
"""

from .http_device_transport import HttpDeviceTransport
from .wireless import get_embedded_wireless_configuration

__all__ = ["HttpDeviceTransport", "get_embedded_wireless_configuration"]
