"""In-memory heartbeat buffer.

This module provides a thread-safe buffer that collects emitted heartbeats
until a transport drains them. The collector runs on the editor thread while a
transport may drain from its own thread, so all access goes through a lock.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import TYPE_CHECKING, Any, Dict, Optional

from loguru import logger

if TYPE_CHECKING:
    from ..core.events import Heartbeat


class HeartbeatBuffer:
    """Bounded FIFO of heartbeats, usable as a collector listener."""

    def __init__(self, max_size: int = 1000):
        """Initialize the heartbeat buffer.

        Args:
            max_size: Maximum heartbeats held; the oldest is dropped when full
        """
        if max_size <= 0:
            raise ValueError(f"Buffer max size must be positive: {max_size}")

        self.max_size = max_size
        self._buffer: deque[Heartbeat] = deque()
        self._lock = threading.Lock()

        # Statistics
        self._total_received = 0
        self._total_dropped = 0

    def __call__(self, heartbeat: Heartbeat) -> None:
        self.append(heartbeat)

    def append(self, heartbeat: Heartbeat) -> None:
        """Add a heartbeat, dropping the oldest one if the buffer is full."""
        with self._lock:
            if len(self._buffer) >= self.max_size:
                dropped = self._buffer.popleft()
                self._total_dropped += 1
                logger.warning(f"Heartbeat buffer full, dropping heartbeat for {dropped.entity}")

            self._buffer.append(heartbeat)
            self._total_received += 1

            logger.debug(f"Buffered heartbeat for {heartbeat.entity}, buffer size: {len(self._buffer)}")

    def drain(self, max_items: Optional[int] = None) -> list[Heartbeat]:
        """Remove and return buffered heartbeats in arrival order.

        Args:
            max_items: Maximum number of heartbeats to return, all if None
        """
        with self._lock:
            count = len(self._buffer) if max_items is None else min(max_items, len(self._buffer))
            return [self._buffer.popleft() for _ in range(count)]

    def size(self) -> int:
        with self._lock:
            return len(self._buffer)

    def get_stats(self) -> Dict[str, Any]:
        """Get buffer statistics."""
        with self._lock:
            return {
                "buffered": len(self._buffer),
                "max_size": self.max_size,
                "total_received": self._total_received,
                "total_dropped": self._total_dropped,
            }
