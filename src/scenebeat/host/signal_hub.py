"""In-process host notifications.

A bridge from a real editor event loop calls :meth:`HostSignal.fire` for each
native notification; tests fire them directly.
"""

from __future__ import annotations

import itertools
from typing import Any, Dict

from loguru import logger

from ..core.events import ActivitySignal
from ..core.subscriber import SignalHandlerFn, Subscription
from ..errors import SubscriptionError


class HostSignal:
    """One named notification with add/remove handler semantics."""

    def __init__(self, signal: ActivitySignal):
        self.signal = signal
        self._handlers: Dict[int, SignalHandlerFn] = {}
        self._next_token = itertools.count(1)

    def start(self, handler: SignalHandlerFn) -> int:
        if any(h is handler for h in self._handlers.values()):
            raise SubscriptionError(f"Handler already registered for {self.signal.value}")
        token = next(self._next_token)
        self._handlers[token] = handler
        return token

    def stop(self, token: int) -> None:
        if token not in self._handlers:
            raise SubscriptionError(f"Unknown token {token!r} for {self.signal.value}")
        del self._handlers[token]

    def fire(self, *payload: Any, **kwargs: Any) -> None:
        """Invoke every registered handler with the host payload."""
        for handler in list(self._handlers.values()):
            handler(*payload, **kwargs)

    def active_handlers(self) -> int:
        return len(self._handlers)


class SignalHub:
    """Holds one HostSignal per activity signal."""

    def __init__(self) -> None:
        self._signals = {signal: HostSignal(signal) for signal in ActivitySignal}

    def __getitem__(self, signal: ActivitySignal) -> HostSignal:
        return self._signals[signal]

    def subscriptions(self) -> Dict[ActivitySignal, Subscription]:
        return dict(self._signals)

    def fire(self, signal: ActivitySignal, *payload: Any, **kwargs: Any) -> None:
        logger.debug(f"Host signal {signal.value}")
        self._signals[signal].fire(*payload, **kwargs)

    def active_handlers(self) -> int:
        """Total handlers registered across all signals."""
        return sum(s.active_handlers() for s in self._signals.values())
