"""FastAPI application factory for the welcome service."""

from fastapi import FastAPI

from welcome_service.config import AppSettings
from welcome_service.domain import UptimeClockPort

from .routers import api_create_health_router, api_create_welcome_router


def create_api_application(settings: AppSettings, uptime_clock: UptimeClockPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        uptime_clock: Clock used by the health endpoint.

    Returns:
        FastAPI: Framework application instance with both routes registered.
    """

    application = FastAPI(title="CI Welcome Service")
    application.include_router(api_create_welcome_router(welcome_message=settings.welcome_message))
    application.include_router(api_create_health_router(uptime_clock=uptime_clock))
    return application
