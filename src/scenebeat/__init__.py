"""scenebeat - Editor activity heartbeats with same-file deduplication."""

from .buffer import HeartbeatBuffer
from .config import CollectorConfig, get_config_manager
from .core import ActivitySignal, Heartbeat, HeartbeatCollector

__version__ = "1.0.0"

__all__ = ["ActivitySignal", "CollectorConfig", "Heartbeat", "HeartbeatBuffer", "HeartbeatCollector", "get_config_manager"]
