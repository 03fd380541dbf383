"""Exception types raised by scenebeat components."""

from __future__ import annotations


class ScenebeatError(Exception):
    """Base class for all scenebeat errors."""


class CommandError(ScenebeatError):
    """An external command could not be launched or did not succeed."""

    def __init__(self, command: str, reason: str):
        super().__init__(f"{command}: {reason}")
        self.command = command
        self.reason = reason


class SubscriptionError(ScenebeatError):
    """Subscribe/unsubscribe calls on a host signal were not paired."""
