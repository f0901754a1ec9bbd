from dataclasses import dataclass
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.errors import ConfigurationError


@dataclass(frozen=True)
class AirtableConfig:
    """Credentials and location of the Airtable base, resolved per request."""

    api_key: str
    base_id: str
    api_url: str = "https://api.airtable.com/v0"


class Settings(BaseSettings):
    # Environment mode: dev or prod
    ENV: Literal["dev", "prod"] = "dev"

    # Airtable (both required at request time, no defaults)
    AIRTABLE_API_KEY: str | None = None
    AIRTABLE_BASE_ID: str | None = None
    AIRTABLE_API_URL: str = "https://api.airtable.com/v0"

    # Transport timeout for the upstream client
    HTTP_TIMEOUT_SECONDS: float = 15.0

    # Logging
    LOG_LEVEL: str = "INFO"
    SLACK_WEBHOOK_URL: str | None = None

    # Docs Configuration
    DOCS_ENABLED: bool | None = None  # Override docs setting (None = auto based on ENV)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # ignore unrelated keys in local .env
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENV == "prod"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENV == "dev"

    @property
    def debug_enabled(self) -> bool:
        """Debug mode is only enabled in development."""
        return self.is_development

    @property
    def effective_log_level(self) -> str:
        """Return appropriate log level based on environment."""
        if self.is_production:
            # In production, minimum INFO level (ignore DEBUG)
            return self.LOG_LEVEL if self.LOG_LEVEL.upper() != "DEBUG" else "INFO"
        return self.LOG_LEVEL

    @property
    def docs_enabled(self) -> bool:
        """Swagger/ReDoc docs enabled based on environment or override."""
        if self.DOCS_ENABLED is not None:
            return self.DOCS_ENABLED
        return self.is_development

    @property
    def airtable_configured(self) -> bool:
        return bool((self.AIRTABLE_API_KEY or "").strip() and (self.AIRTABLE_BASE_ID or "").strip())

    def airtable_config(self) -> AirtableConfig:
        """Resolve the Airtable credentials or fail before any remote call is made."""
        if not self.airtable_configured:
            raise ConfigurationError(
                "Server configuration error: Airtable environment variables not set."
            )
        return AirtableConfig(
            api_key=self.AIRTABLE_API_KEY.strip(),
            base_id=self.AIRTABLE_BASE_ID.strip(),
            api_url=self.AIRTABLE_API_URL.rstrip("/"),
        )


settings = Settings()
