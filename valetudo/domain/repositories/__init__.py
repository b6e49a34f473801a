"""
Repositories Package

This package contains interfaces defining storage contracts. Specific
implementations are provided by the infrastructure layer.
"""

from .config_store import IConfigStore

__all__ = ["IConfigStore"]
