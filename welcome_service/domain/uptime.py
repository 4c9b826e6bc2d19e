"""Process uptime clock backed by a monotonic time source."""

import threading
import time
from collections.abc import Callable

from .interfaces import UptimeClockPort

# Captured once when the package is first imported by the runtime entrypoint.
PROCESS_STARTED_AT = time.monotonic()


class ProcessUptimeClock(UptimeClockPort):
    """Measure elapsed seconds from a fixed start instant.

    Readings never go below zero and never decrease, even when an injected
    time source steps backwards.
    """

    def __init__(
        self,
        monotonic_source: Callable[[], float] = time.monotonic,
        started_at: float | None = None,
    ):
        """Initialize uptime clock and resolve the start instant.

        Args:
            monotonic_source: Callable returning seconds from a monotonic clock.
            started_at: Start instant on the same clock; read from the source when omitted.

        Raises:
            ValueError: Raised when monotonic_source is None.
        """

        if monotonic_source is None:
            raise ValueError("monotonic_source must not be None")
        self._monotonic_source = monotonic_source
        self._started_at = float(monotonic_source() if started_at is None else started_at)
        self._high_water_mark = 0.0
        self._lock = threading.Lock()

    def uptime_seconds(self) -> float:
        """Return elapsed seconds since the start instant.

        Returns:
            float: Elapsed seconds, clamped to the highest value already reported.
        """

        elapsed_seconds = float(self._monotonic_source()) - self._started_at
        with self._lock:
            if elapsed_seconds > self._high_water_mark:
                self._high_water_mark = elapsed_seconds
            return self._high_water_mark
