"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVEL_NAMES = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the HTTP listener.

    Environment variable names map directly to field names in uppercase.
    Example: `app_env` reads from `APP_ENV`.

    Attributes:
        app_env: Runtime environment label reported at startup.
        host: Host interface for web server binding.
        port: Web server port.
        welcome_message: Text returned by the index route.
        log_level: Minimum log level for the stderr sink.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    app_env: str = Field(default="development")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    welcome_message: str = Field(default="Welcome to the FastAPI Server with Jenkins CI/CD")
    log_level: str = Field(default="INFO")

    @field_validator("app_env", "host", "welcome_message")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in LOG_LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVEL_NAMES)}")
        return normalized_value


def config_load_settings(**overrides) -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Args:
        overrides: Field values that take precedence over environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings(**overrides)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
