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


class EnumLogFormat(str, Enum):
    """Log renderer; ``auto`` picks JSON in production and console otherwise."""

    AUTO = "auto"
    CONSOLE = "console"
    JSON = "json"
