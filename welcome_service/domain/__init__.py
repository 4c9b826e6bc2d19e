"""Domain models used across application layer boundaries."""

from .interfaces import UptimeClockPort
from .models import HealthStatus, WelcomeMessage
from .uptime import PROCESS_STARTED_AT, ProcessUptimeClock

__all__ = ["PROCESS_STARTED_AT", "HealthStatus", "ProcessUptimeClock", "UptimeClockPort", "WelcomeMessage"]
