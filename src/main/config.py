"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogFormat, EnumLogLevel
from src.shared.env import load_secret_file_variables  # noqa: F401


class DatabaseSettings(BaseSettings):
    """Order data source settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/storefront",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="storefront", description="Name of the MongoDB database"
    )
    orders_collection: str = Field(
        default="orders", description="Collection holding order documents"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class ServiceSettings(BaseSettings):
    """Service metadata and server settings."""

    title: str = Field(
        default="Storefront Financial Analytics", description="Service title"
    )
    description: str = Field(
        default="Revenue statistics, forecasts and financial reports "
        "for the storefront admin dashboard",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("APP_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("APP_BUILD_TIME", "BUILD_TIME"),
    )
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class AuthSettings(BaseSettings):
    """Token verification settings for the admin routes."""

    jwt_secret: str = Field(
        default="change-me", description="Secret used to verify HS256 tokens"
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    admin_role: str = Field(
        default="ADMIN", description="Role required by the financial routes"
    )

    model_config = SettingsConfigDict(
        env_prefix="AUTH_", case_sensitive=False, extra="ignore"
    )


class AnalyticsSettings(BaseSettings):
    """Tunables of the financial analytics engine."""

    top_products_limit: int = Field(
        default=10, ge=0, description="Products listed in top product rankings"
    )
    forecast_fallback_orders: int = Field(
        default=10,
        ge=0,
        description="Recent orders used for the forecast baseline without history",
    )
    forecast_default_baseline: Decimal = Field(
        default=Decimal(1000),
        ge=0,
        description="Monthly baseline used when there are no orders at all",
    )

    model_config = SettingsConfigDict(
        env_prefix="ANALYTICS_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: EnumLogFormat = Field(
        default=EnumLogFormat.AUTO,
        description="Log renderer: auto (JSON in production), console or json",
    )
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

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    service: ServiceSettings = Field(default_factory=ServiceSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)
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
    Build the settings instance.

    Patched in tests to provide environment specific settings.
    """
    return AppSettings()


settings = get_settings()
