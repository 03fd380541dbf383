"""Core collector components."""

from .collector import HeartbeatCollector
from .deduplicator import Deduplicator, HeartbeatListener
from .events import UNSAVED_SCENE, WRITE_SIGNALS, ActivitySignal, Heartbeat
from .heartbeat_factory import HeartbeatFactory, HostContext
from .subscriber import ActivitySubscriber, Subscription
from .vcs import BranchResolver, CommandRunner, SubprocessRunner

__all__ = [
    # Records
    "ActivitySignal",
    "Heartbeat",
    "UNSAVED_SCENE",
    "WRITE_SIGNALS",
    # Components
    "BranchResolver",
    "CommandRunner",
    "SubprocessRunner",
    "HeartbeatFactory",
    "HostContext",
    "Deduplicator",
    "HeartbeatListener",
    "ActivitySubscriber",
    "Subscription",
    # Collector
    "HeartbeatCollector",
]
