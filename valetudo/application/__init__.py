"""
Application Layer Package

This package contains the application-specific business rules
and use cases. It orchestrates the flow of data to and from
the domain entities and the robot's capabilities.
"""

# Re-export submodules
from valetudo.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
