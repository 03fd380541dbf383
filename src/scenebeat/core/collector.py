"""Heartbeat collector for an editor session.

This module wires the collector components together:
- Branch lookup through git
- Heartbeat creation from the active scene
- Same-file deduplication
- Subscription to editor activity signals
"""

from __future__ import annotations

import time
from typing import Callable, Mapping, Optional

from loguru import logger

from ..buffer import HeartbeatBuffer
from ..config import CollectorConfig
from .deduplicator import Deduplicator, HeartbeatListener
from .events import ActivitySignal
from .heartbeat_factory import HeartbeatFactory, HostContext
from .subscriber import ActivitySubscriber, Subscription
from .vcs import BranchResolver, CommandRunner


class HeartbeatCollector:
    """Catches editor activity and emits heartbeats to listeners."""

    def __init__(
        self,
        config: CollectorConfig,
        signals: Mapping[ActivitySignal, Subscription],
        host: HostContext,
        runner: Optional[CommandRunner] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize heartbeat collector.

        Args:
            config: Collector configuration
            signals: Host subscription for each activity signal
            host: Query for the active scene and data root
            runner: Command runner for git, a SubprocessRunner by default
            clock: Monotonic time source used for deduplication

        Raises:
            ValueError: if the configuration does not validate
        """
        is_valid, errors = config.validate()
        if not is_valid:
            raise ValueError(f"Invalid collector configuration: {'; '.join(errors)}")

        self.config = config

        self.branch_resolver = BranchResolver(runner=runner, git_executable=config.git_executable, timeout=config.branch_timeout)
        self.factory = HeartbeatFactory(config.project_name, self.branch_resolver)
        self.deduplicator = Deduplicator(config.same_file_timeout, clock=clock)
        self.subscriber = ActivitySubscriber(signals, self.factory, host, self.deduplicator, strict=config.strict)

        self._running = False

    def __enter__(self) -> HeartbeatCollector:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def running(self) -> bool:
        return self._running

    def on_heartbeat(self, listener: HeartbeatListener) -> None:
        """Register a listener for emitted heartbeats."""
        self.deduplicator.add_listener(listener)

    def remove_listener(self, listener: HeartbeatListener) -> None:
        self.deduplicator.remove_listener(listener)

    def create_buffer(self) -> HeartbeatBuffer:
        """Create a HeartbeatBuffer sized from configuration and register it as a listener."""
        buffer = HeartbeatBuffer(self.config.buffer_max_size)
        self.on_heartbeat(buffer)
        return buffer

    def start(self) -> None:
        """Subscribe to editor activity signals."""
        self.subscriber.start()
        self._running = True
        logger.info(f"Heartbeat collector started for project: {self.config.project_name}")

    def close(self) -> None:
        """Unsubscribe from all signals; no heartbeat is emitted afterwards."""
        self.subscriber.stop()
        if self._running:
            self._running = False
            logger.info("Heartbeat collector stopped")

    def get_status(self) -> dict:
        """Get collector status information."""
        return {
            "running": self._running,
            "project": self.config.project_name,
            "same_file_timeout": self.deduplicator.window,
        }
