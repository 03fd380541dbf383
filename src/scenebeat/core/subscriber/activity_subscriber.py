"""Subscription to editor activity notifications.

Each host notification is registered with one handler that calls
:meth:`ActivitySubscriber.on_activity`. Every handler registered by
:meth:`ActivitySubscriber.start` is released by :meth:`ActivitySubscriber.stop`,
and nothing is emitted once ``stop`` has run.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Mapping, Protocol

from loguru import logger

from ..deduplicator import Deduplicator
from ..events import WRITE_SIGNALS, ActivitySignal
from ..heartbeat_factory import HeartbeatFactory, HostContext

# Host payloads are ignored
SignalHandlerFn = Callable[..., None]


class Subscription(Protocol):
    """Protocol for attaching to one named host notification."""

    def start(self, handler: SignalHandlerFn) -> Hashable:
        """Register ``handler`` and return a token for :meth:`stop`."""
        ...

    def stop(self, token: Hashable) -> None:
        """Unregister the handler registered under ``token``."""
        ...


class ActivitySubscriber:
    """Turns host activity notifications into deduplicated heartbeats."""

    def __init__(
        self,
        signals: Mapping[ActivitySignal, Subscription],
        factory: HeartbeatFactory,
        host: HostContext,
        deduplicator: Deduplicator,
        strict: bool = False,
    ) -> None:
        self._signals = dict(signals)
        self.factory = factory
        self.host = host
        self.deduplicator = deduplicator
        self.strict = strict
        self._tokens: Dict[ActivitySignal, Hashable] = {}
        self._started = False
        self._closed = False

    @property
    def closed(self) -> bool:
        """True once :meth:`stop` has run."""
        return self._closed

    def start(self) -> None:
        """Register one handler per activity signal.

        Raises:
            RuntimeError: if already started or already stopped
        """
        if self._closed:
            raise RuntimeError("ActivitySubscriber is closed")
        if self._started:
            raise RuntimeError("ActivitySubscriber already started")
        self._started = True

        for signal, subscription in self._signals.items():
            self._tokens[signal] = subscription.start(self._make_handler(signal in WRITE_SIGNALS))

        logger.debug(f"Subscribed to {len(self._tokens)} activity signals")

    def stop(self) -> None:
        """Release every registered handler. Safe to call more than once.

        A subscription whose ``stop`` raises is logged and the remaining
        tokens are still released.
        """
        if self._closed:
            return
        self._closed = True

        while self._tokens:
            signal, token = self._tokens.popitem()
            try:
                self._signals[signal].stop(token)
            except Exception:  # noqa: BLE001
                logger.exception("Failed to unsubscribe from {}", signal.value)

        logger.debug("Unsubscribed from activity signals")

    def on_activity(self, is_write: bool = False) -> bool:
        """Create a heartbeat for the current host state and submit it.

        Returns:
            True if a heartbeat was emitted
        """
        if self._closed:
            logger.debug("Dropping activity signal received after teardown")
            return False

        try:
            logger.debug("Created heartbeat")
            heartbeat = self.factory.create(self.host)
            heartbeat.is_write = is_write
            return self.deduplicator.submit(heartbeat)
        except Exception:
            if self.strict:
                raise
            logger.exception("Failed to handle activity signal")
            return False

    def _make_handler(self, is_write: bool) -> SignalHandlerFn:
        def handler(*_payload: Any, **_kwargs: Any) -> None:
            self.on_activity(is_write)

        return handler
