"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class CapabilityNotImplementedError(DomainError):
    """Raised by a capability operation that the device family does not support."""

    def __init__(
        self,
        capability_type: str,
        operation: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.capability_type = capability_type
        self.operation = operation
        message = f"{capability_type}.{operation} is not implemented"
        super().__init__(message, details)


class CapabilityRegistrationError(DomainError):
    """Raised when a capability type is registered twice for the same robot."""

    def __init__(self, capability_type: str, details: Optional[Dict[str, Any]] = None):
        self.capability_type = capability_type
        message = f"Capability {capability_type} is already registered"
        super().__init__(message, details)


class InvalidArgumentError(DomainError):
    """Raised when an operation receives an argument it cannot act upon."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class NotFoundError(DomainError):
    """Raised when a referenced resource does not exist."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ZonePresetNotFoundError(NotFoundError):
    """Raised when a zone preset cannot be found."""

    def __init__(self, preset_id: str, details: Optional[Dict[str, Any]] = None):
        self.preset_id = preset_id
        message = f"Zone preset with ID {preset_id} not found"
        super().__init__(message, details)


class DeviceTransportError(DomainError):
    """Raised when a command could not be delivered to or answered by the device."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
