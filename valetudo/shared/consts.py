from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumConfigBackend(str, Enum):
    MEMORY = "memory"
    JSON = "json"
    MONGO = "mongo"


ZONE_PRESETS_CONFIG_KEY = "zonePresets"
EMBEDDED_CONFIG_KEY = "embedded"

CAPABILITIES_PREFIX = "/api/v2/robot/capabilities"
