"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the configuration
store, the device transport and the concrete device families.
"""

from valetudo.infrastructure import repositories, robots

__all__ = ["repositories", "robots"]
