"""Health endpoint router composition for liveness and uptime checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from welcome_service.domain import HealthStatus, UptimeClockPort


def api_create_health_router(uptime_clock: UptimeClockPort) -> APIRouter:
    """Create health-check router reporting process uptime.

    Args:
        uptime_clock: Clock measuring seconds since process start.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when uptime_clock is invalid.
    """

    if uptime_clock is None:
        raise ValueError("uptime_clock must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return liveness status and uptime in seconds.

        Returns:
            JSONResponse: Health payload for operational checks.
        """

        health = HealthStatus(status="ok", uptime_seconds=uptime_clock.uptime_seconds())
        payload = {"status": health.status, "uptime": health.uptime_seconds}
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
