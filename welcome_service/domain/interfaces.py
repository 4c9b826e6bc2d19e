"""Typed interfaces for domain services."""

from typing import Protocol


class UptimeClockPort(Protocol):
    """Port definition for process uptime measurement."""

    def uptime_seconds(self) -> float:
        """Return elapsed seconds since process start.

        Returns:
            float: Non-negative, non-decreasing elapsed seconds.
        """
