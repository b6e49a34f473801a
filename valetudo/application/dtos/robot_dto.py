"""
Robot DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) describing the robot and the
request bodies shared by the simple capability routers.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RobotInfoDTO(BaseModel):
    """DTO for the robot summary."""

    model_config = ConfigDict(populate_by_name=True)

    manufacturer: str = Field(description="Robot manufacturer")
    model_name: str = Field(alias="modelName", description="Robot model")
    capabilities: List[str] = Field(description="Registered capability types")


class RobotStateDTO(BaseModel):
    """DTO for the robot state snapshot."""

    attributes: List[Dict[str, Any]] = Field(description="Serialized attributes")
    metadata: Dict[str, Any] = Field(default_factory=dict)


class CapabilityActionDTO(BaseModel):
    """DTO for capability routes driven by an ``action`` field."""

    action: str = Field(description="Action to perform")


class ManualControlActionDTO(CapabilityActionDTO):
    """DTO for the manual control capability."""

    model_config = ConfigDict(populate_by_name=True)

    movement_command: Optional[str] = Field(
        default=None,
        alias="movementCommand",
        description="Movement for the 'move' action",
    )
