"""
Domain Layer Package

This package contains the core rules of the application: entities,
capability contracts and the ports implemented by the infrastructure layer,
without dependencies on external frameworks.
"""

# Re-export submodules
from valetudo.domain import capabilities, entities, gateways, repositories

__all__ = ["entities", "capabilities", "gateways", "repositories"]
