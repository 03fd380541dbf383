"""Heartbeat buffer module for the scenebeat collector."""

from .heartbeat_buffer import HeartbeatBuffer

__all__ = ["HeartbeatBuffer"]
