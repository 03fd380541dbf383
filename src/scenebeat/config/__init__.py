"""Configuration module for the scenebeat collector."""

from .logger_config import setup_logging
from .settings import CollectorConfig, ConfigManager, get_config_manager

__all__ = ["CollectorConfig", "ConfigManager", "get_config_manager", "setup_logging"]
