"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./marketplace.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    environment: str = Field(
        default="development",
        description="Deployment environment name reported by health endpoints",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone (or UTC offset) used to evaluate quiet hours",
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending transactional emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of transactional messages",
        min_length=3,
    )
    twilio_account_sid: str | None = Field(
        default=None, description="Twilio account SID used for SMS delivery"
    )
    twilio_auth_token: str | None = Field(
        default=None, description="Twilio auth token used for SMS delivery"
    )
    twilio_phone_number: str | None = Field(
        default=None, description="Twilio number SMS messages are sent from"
    )
    azure_storage_connection_string: str | None = Field(
        default=None, description="Connection string for the Azure Blob Storage account"
    )
    azure_storage_container_name: str | None = Field(
        default=None, description="Blob container holding uploaded images"
    )
    quiet_hours_exempt_types: str | None = Field(
        default=None,
        description=(
            "Comma separated notification types delivered during quiet hours. "
            "When unset the notification type catalog decides."
        ),
    )

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self

    def exempt_notification_types(self) -> frozenset[str] | None:
        """Return the configured quiet-hours exemptions, or ``None`` if unset."""

        if self.quiet_hours_exempt_types is None:
            return None
        return frozenset(
            item.strip()
            for item in self.quiet_hours_exempt_types.split(",")
            if item.strip()
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
