"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for device communications. Specific implementations are provided
by the infrastructure layer.
"""

from .device_transport import IDeviceTransport

__all__ = ["IDeviceTransport"]
