"""Same-file throttling for heartbeats.

Editor notifications such as hierarchy changes fire far more often than is
useful for time tracking. The deduplicator collapses bursts on one entity into
a single heartbeat per window while letting other entities through.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from loguru import logger

from .events import Heartbeat

HeartbeatListener = Callable[[Heartbeat], None]


class Deduplicator:
    """Suppresses repeated heartbeats for the same entity within a window."""

    def __init__(self, window: float, clock: Callable[[], float] = time.monotonic):
        """Initialize deduplicator.

        Args:
            window: Same-file timeout in seconds
            clock: Monotonic time source in seconds
        """
        if window < 0:
            raise ValueError(f"Deduplication window must not be negative: {window}")

        self.window = window
        self._clock = clock
        self._history: dict[str, float] = {}
        self._listeners: list[HeartbeatListener] = []

    def add_listener(self, listener: HeartbeatListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: HeartbeatListener) -> None:
        self._listeners.remove(listener)

    def last_seen(self, entity: str) -> Optional[float]:
        """Clock reading of the last emitted heartbeat for ``entity``."""
        return self._history.get(entity)

    def submit(self, heartbeat: Heartbeat) -> bool:
        """Emit ``heartbeat`` unless its entity was emitted within the window.

        Returns:
            True if the heartbeat was emitted, False if suppressed
        """
        now = self._clock()

        last = self._history.get(heartbeat.entity)
        if last is not None and now - last < self.window:
            logger.debug(f"Suppressed heartbeat for {heartbeat.entity}")
            return False

        self._history[heartbeat.entity] = now

        for listener in list(self._listeners):
            try:
                listener(heartbeat)
            except Exception:  # noqa: BLE001
                logger.exception("Heartbeat listener {} raised", listener)

        return True
