"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from welcome_service.api import create_api_application
from welcome_service.config import AppSettings, config_configure_logging, config_load_settings
from welcome_service.domain import PROCESS_STARTED_AT, ProcessUptimeClock


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings if settings is not None else config_load_settings()
    config_configure_logging(log_level=resolved_settings.log_level)
    uptime_clock = ProcessUptimeClock(started_at=PROCESS_STARTED_AT)
    return create_api_application(settings=resolved_settings, uptime_clock=uptime_clock)
