"""
Robots Package - Infrastructure Layer

This package contains the concrete device families. Each family subclasses
the domain ``Robot`` and registers its capability implementations.
"""

from .roborock import RoborockRobot

ROBOT_IMPLEMENTATIONS = {
    "roborock": RoborockRobot,
}

__all__ = ["RoborockRobot", "ROBOT_IMPLEMENTATIONS"]
