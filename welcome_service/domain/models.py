"""Typed response contracts shared across runtime layers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WelcomeMessage:
    """Index route payload.

    Attributes:
        message: Human-readable welcome text.
    """

    message: str


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        uptime_seconds: Seconds elapsed since the process started serving.
    """

    status: str
    uptime_seconds: float
