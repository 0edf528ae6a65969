"""
Application Settings - Main Layer

Configuration is read with Pydantic Settings from environment variables,
a ``.env`` file and defaults. ``*_FILE`` variables pointing at Docker
secrets are resolved before the settings load.
"""

from typing import Annotated, List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from maker_bridge.shared import EnumEnvironment, EnumLogLevel
from maker_bridge.shared.env import load_secret_file_variables  # noqa: F401


class ServiceSettings(BaseSettings):
    """HTTP service metadata and bind options."""

    title: str = Field(default="Maker Bridge", description="Service title")
    description: str = Field(
        default="Bridge between a workflow host and the Hubitat Maker API",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("SERVICE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("SERVICE_BUILD_TIME", "BUILD_TIME"),
    )
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class HubSettings(BaseSettings):
    """Default Maker API credential and client options."""

    host: str = Field(
        default="http://192.168.0.100", description="Base URL of the Hubitat hub"
    )
    app_id: Optional[str] = Field(
        default=None, description="Maker API application id"
    )
    access_token: Optional[str] = Field(
        default=None, description="Maker API access token"
    )
    timeout: float = Field(
        default=5.0, description="Timeout in seconds for Maker API requests"
    )

    model_config = SettingsConfigDict(
        env_prefix="HUBITAT_", case_sensitive=False, extra="ignore"
    )


class TriggerSettings(BaseSettings):
    """Defaults for webhook filtering when the query string omits them."""

    event_type: str = Field(default="allEvents", description="Event type to accept")
    custom_event_type: Optional[str] = Field(
        default=None, description="Source value required by the custom event type"
    )
    filter_by_device: bool = Field(
        default=False, description="Only accept events from listed devices"
    )
    device_ids: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        description="Comma separated device ids accepted when filtering",
    )

    model_config = SettingsConfigDict(
        env_prefix="TRIGGER_", case_sensitive=False, extra="ignore"
    )

    @field_validator("device_ids", mode="before")
    @classmethod
    def _split_device_ids(cls, value):
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value


class WorkflowSettings(BaseSettings):
    """Target that receives forwarded webhook events."""

    forward_url: Optional[str] = Field(
        default=None, description="URL that starts a workflow run"
    )
    auth_token: Optional[str] = Field(
        default=None, description="Bearer token sent to the workflow host"
    )
    timeout: float = Field(
        default=8.0, description="Timeout in seconds for workflow dispatch"
    )

    model_config = SettingsConfigDict(
        env_prefix="WORKFLOW_", case_sensitive=False, extra="ignore"
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

    service: ServiceSettings = Field(default_factory=ServiceSettings)
    hubitat: HubSettings = Field(default_factory=HubSettings)
    trigger: TriggerSettings = Field(default_factory=TriggerSettings)
    workflow: WorkflowSettings = Field(default_factory=WorkflowSettings)
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

    Patched in tests to provide environment specific settings.
    """
    return AppSettings()


settings = get_settings()
