"""Environment-driven settings for langstore."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from langstore.models import DEFAULT_EXTENSION, DEFAULT_LOCALE, DEFAULT_LOCATION


class LangstoreSettings(BaseSettings):
    """Runtime configuration for the default store, fetchers and logging.

    Environment Variables:
        LANGSTORE_LOG_LEVEL: Logging level (default: INFO)
        LANGSTORE_ENVIRONMENT: Deployment environment (default: development)
        LANGSTORE_LOCATION: Base path or URL of language files (default: assets/lang/)
        LANGSTORE_EXTENSION: Language file suffix (default: .lang)
        LANGSTORE_LOCALE: Initial locale of the default store (default: en-US)
        LANGSTORE_FETCH_TIMEOUT: HTTP fetch timeout in seconds (default: 10.0)

    Example:
        ```python
        from langstore.settings import get_settings

        settings = get_settings()
        if settings.is_production:
            ...
        ```
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(default="INFO", alias="LANGSTORE_LOG_LEVEL")
    ENVIRONMENT: str = Field(default="development", alias="LANGSTORE_ENVIRONMENT")
    LOCATION: str = Field(default=DEFAULT_LOCATION, alias="LANGSTORE_LOCATION")
    EXTENSION: str = Field(default=DEFAULT_EXTENSION, alias="LANGSTORE_EXTENSION")
    LOCALE: str = Field(default=DEFAULT_LOCALE, alias="LANGSTORE_LOCALE")
    FETCH_TIMEOUT: float = Field(
        default=10.0,
        alias="LANGSTORE_FETCH_TIMEOUT",
        description="Timeout in seconds for HTTP language fetches",
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


def get_settings() -> LangstoreSettings:
    """Load settings from the environment (and .env file if present)."""
    return LangstoreSettings()
