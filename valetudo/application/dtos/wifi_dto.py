"""
Wifi DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for the wifi configuration
capability. Fields are optional at this layer; the capability rejects an
unusable configuration with an invalid-argument error.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from valetudo.domain.entities.wifi import (
    WifiConfiguration,
    WifiCredentials,
    WifiCredentialsType,
    WifiFrequency,
    WifiState,
)


class WifiCredentialsDTO(BaseModel):
    """DTO for network credentials."""

    model_config = ConfigDict(populate_by_name=True)

    type: WifiCredentialsType = Field(description="Credentials type")
    type_specific_settings: Dict[str, Any] = Field(
        default_factory=dict,
        alias="typeSpecificSettings",
        description="Type specific settings, e.g. {'password': ...}",
    )


class WifiConfigurationUpdateDTO(BaseModel):
    """DTO for joining a network."""

    ssid: Optional[str] = Field(default=None, description="Network name")
    credentials: Optional[WifiCredentialsDTO] = Field(default=None)

    model_config = {
        "json_schema_extra": {
            "example": {
                "ssid": "HomeNetwork",
                "credentials": {
                    "type": "wpa2_psk",
                    "typeSpecificSettings": {"password": "secret"},
                },
            }
        }
    }

    def to_entity(self) -> WifiConfiguration:
        credentials = None
        if self.credentials is not None:
            credentials = WifiCredentials(
                type=self.credentials.type,
                type_specific_settings=dict(self.credentials.type_specific_settings),
            )
        return WifiConfiguration(ssid=self.ssid, credentials=credentials)


class WifiDetailsDTO(BaseModel):
    """DTO for the reported connection details."""

    state: WifiState
    signal: Optional[int] = None
    ips: List[str] = Field(default_factory=list)
    frequency: Optional[WifiFrequency] = None


class WifiConfigurationDTO(BaseModel):
    """DTO for the reported wifi configuration."""

    ssid: Optional[str] = None
    details: WifiDetailsDTO

    @classmethod
    def from_entity(cls, entity: WifiConfiguration) -> "WifiConfigurationDTO":
        return cls.model_validate(entity.to_dict())
