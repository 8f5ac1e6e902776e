"""Rate-limited telemetry polling."""

import logging
import time
from collections.abc import Callable

from fwtui.hardware.protocols import HardwareBackend
from fwtui.models.snapshot import Snapshot

logger = logging.getLogger(__name__)


class SnapshotRefreshSource:
    """
    Produces snapshots from the hardware backend at most once per period.

    Ticks always poll; key presses use poll_if_needed so that a fast typist
    cannot hammer the hardware.
    """

    def __init__(
        self,
        backend: HardwareBackend,
        period: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the refresh source.

        Args:
            backend: Where snapshots come from
            period: Minimum seconds between two polls in poll_if_needed
            clock: Monotonic time source (injectable for tests)
        """
        self.backend = backend
        self.period = period
        self._clock = clock
        self._last_poll: float | None = None

    @property
    def last_poll(self) -> float | None:
        return self._last_poll

    def poll(self) -> Snapshot:
        """Fetch a snapshot unconditionally."""
        snapshot = self.backend.poll()
        self._last_poll = self._clock()
        return snapshot

    def poll_if_needed(self) -> Snapshot | None:
        """Fetch a snapshot if at least one period elapsed since the last poll."""
        if self._last_poll is not None and self._clock() - self._last_poll < self.period:
            return None
        return self.poll()
