"""
Use Cases Package - Application Layer

This package contains the application use cases orchestrating the domain
entities, the robot and the configuration store.
"""

from .robot_use_cases import GetRobotInfoUseCase, GetRobotStateUseCase
from .zone_preset_use_cases import ZonePresetUseCases

__all__ = ["GetRobotInfoUseCase", "GetRobotStateUseCase", "ZonePresetUseCases"]
