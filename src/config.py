# src/config.py
"""Application configuration using pydantic-settings.

Provides a centralized Settings class for all environment variables.
"""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings are loaded from .env file and environment variables.
    Environment variables take precedence over .env file values.
    """

    # Slack Integration
    slack_signing_secret: str = ""
    slack_bot_token: str = ""
    slack_app_token: str = ""  # Socket Mode is used when set
    port: int = 3000

    # Administrator allow-list (declared, not enforced by any command)
    slack_admin_user_ids: list[str] = []

    # Jenkins
    jenkins_url: str = ""
    jenkins_user: str = ""
    jenkins_token: str = ""
    jenkins_timeout: float = 5.0

    # Presentation
    display_timezone: str = "UTC"
    timestamp_format: str = "%Y-%m-%d %H:%M:%S %Z"
    log_page_size: int = 2500
    log_max_pages: int = 5

    # Logging / Observability
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"
    logfire_token: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
        case_sensitive=False,  # Allow case-insensitive env var names
    )

    @field_validator("jenkins_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("display_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown IANA timezone: {value!r}") from e
        return value

    @field_validator("log_page_size", "log_max_pages")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value

    @property
    def socket_mode(self) -> bool:
        """Whether the bot connects through Socket Mode instead of HTTP."""
        return bool(self.slack_app_token)

    def validate_required(self) -> list[str]:
        """Return the environment variable names of missing required settings.

        SLACK_SIGNING_SECRET is only required for the HTTP receiver;
        Socket Mode authenticates with the app token instead.

        Returns:
            Upper-case names of unset settings, empty when complete.
        """
        required = ["slack_bot_token", "jenkins_url", "jenkins_user", "jenkins_token"]
        if not self.socket_mode:
            required.append("slack_signing_secret")
        return [name.upper() for name in required if not getattr(self, name)]


# Singleton instance - import this in your code
settings = Settings()
