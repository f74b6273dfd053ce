"""Centralized provider settings using pydantic-settings.

This module provides a single source of truth for provider configuration
loaded from environment variables. Uses pydantic for automatic validation,
type coercion, and documentation.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Provider configuration loaded from environment variables.

    Override any value via the environment variable named in its
    ``validation_alias``.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Keycloak connection
    keycloak_url: str = Field(
        default="http://localhost:8080",
        validation_alias="KEYCLOAK_URL",
        description="Base URL of the Keycloak server",
    )
    keycloak_admin_token: str = Field(
        default="",
        validation_alias="KEYCLOAK_ADMIN_TOKEN",
        description="Pre-issued bearer token for the Admin REST API",
    )
    keycloak_verify_ssl: bool = Field(
        default=True,
        validation_alias="KEYCLOAK_VERIFY_SSL",
        description="Verify TLS certificates when talking to Keycloak",
    )
    keycloak_request_timeout: float = Field(
        default=60.0,
        validation_alias="KEYCLOAK_REQUEST_TIMEOUT",
        description="Admin API request timeout in seconds",
        gt=0,
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_logs: bool = Field(
        default=True,
        validation_alias="JSON_LOGS",
        description="Enable JSON formatted logging for structured log aggregation",
    )
    correlation_ids: bool = Field(
        default=True,
        validation_alias="CORRELATION_IDS",
        description="Enable correlation IDs in logs for request tracing",
    )

    # Metrics
    metrics_enabled: bool = Field(
        default=True,
        validation_alias="METRICS_ENABLED",
        description="Record Prometheus metrics for provider operations",
    )


settings = Settings()
