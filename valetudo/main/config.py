"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from valetudo.shared import (
    CAPABILITIES_PREFIX,
    EnumConfigBackend,
    EnumEnvironment,
    EnumLogLevel,
)
from valetudo.shared.env import load_secret_file_variables  # noqa: F401


class APISettings(BaseSettings):
    """HTTP API configuration settings."""

    title: str = Field(default="Valetudo", description="API title")
    description: str = Field(
        default="Cloud-free local control of robot vacuum cleaners",
        description="API description",
    )
    version: str = Field(default="2.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(default=8080, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )
    capabilities_prefix: str = Field(
        default=CAPABILITIES_PREFIX,
        description="Path under which capability routers are mounted",
    )

    model_config = SettingsConfigDict(
        env_prefix="API_", case_sensitive=False, extra="ignore"
    )


class DatabaseSettings(BaseSettings):
    """Database configuration settings, used by the mongo config backend."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/valetudo",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="valetudo", description="Name of the MongoDB database"
    )
    config_collection: str = Field(
        default="config", description="Collection holding configuration keys"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class RobotSettings(BaseSettings):
    """Robot and device configuration settings."""

    implementation: str = Field(
        default="roborock", description="Device family to instantiate"
    )
    transport_url: str = Field(
        default="http://127.0.0.1:54321",
        description="Base URL of the device command endpoint",
    )
    transport_timeout: float = Field(
        default=10.0, gt=0, description="Timeout in seconds for device commands"
    )
    config_backend: EnumConfigBackend = Field(
        default=EnumConfigBackend.JSON, description="Configuration store backend"
    )
    config_path: str = Field(
        default="valetudo_config.json",
        description="Configuration file used by the json backend",
    )
    embedded: bool = Field(
        default=False,
        description="Running on the robot itself; wifi state is read locally",
    )

    model_config = SettingsConfigDict(
        env_prefix="ROBOT_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    api: APISettings = Field(default_factory=APISettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    robot: RobotSettings = Field(default_factory=RobotSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()
