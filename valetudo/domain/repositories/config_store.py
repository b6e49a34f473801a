"""
Config Store Interface

This module defines the interface for the persisted configuration store.
Configuration is addressed by string keys (``"zonePresets"``,
``"embedded"``); values are JSON-compatible structures.
"""

from abc import ABC, abstractmethod
from typing import Any


class IConfigStore(ABC):
    """Interface for key/value configuration store implementations."""

    @abstractmethod
    async def get(self, key: str) -> Any:
        """
        Get the value stored under a key.

        Implementations return a copy: callers may mutate the returned value
        freely and persist their changes with ``set``.

        Args:
            key: Configuration key

        Returns:
            The stored value, the key's default, or None if neither exists
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """
        Replace the value stored under a key.

        Args:
            key: Configuration key
            value: JSON-compatible value to store
        """
        pass

    async def initialize(self) -> None:
        """Prepare the underlying storage on application startup."""

    def close(self) -> None:
        """Release the underlying storage on application shutdown."""
