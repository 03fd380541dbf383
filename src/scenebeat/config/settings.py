"""Configuration management for the scenebeat collector.

This module provides the collector configuration and allows environment
variable overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class CollectorConfig:
    """Complete heartbeat collector configuration."""

    project_name: str = ""

    # Deduplication window (seconds)
    same_file_timeout: float = 120.0

    # Branch lookup
    branch_timeout: float = 5.0
    git_executable: str = "git"

    # Re-raise handler errors instead of logging them
    strict: bool = False

    # Heartbeat buffer
    buffer_max_size: int = 1000

    # Logging
    log_level: str = "INFO"
    log_to_console: bool = True
    log_file: Optional[Path] = None

    def __post_init__(self):
        """Apply environment variable overrides."""
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply configuration overrides from environment variables."""
        if project_name := os.getenv("SCENEBEAT_PROJECT"):
            self.project_name = project_name

        if same_file_timeout := os.getenv("SCENEBEAT_SAME_FILE_TIMEOUT"):
            try:
                self.same_file_timeout = float(same_file_timeout)
            except ValueError:
                logger.warning(f"Invalid same file timeout: {same_file_timeout}")

        if branch_timeout := os.getenv("SCENEBEAT_BRANCH_TIMEOUT"):
            try:
                self.branch_timeout = float(branch_timeout)
            except ValueError:
                logger.warning(f"Invalid branch timeout: {branch_timeout}")

        if git_executable := os.getenv("SCENEBEAT_GIT"):
            self.git_executable = git_executable

        if strict := os.getenv("SCENEBEAT_STRICT"):
            self.strict = strict.strip().lower() in _TRUTHY

        if buffer_max_size := os.getenv("SCENEBEAT_BUFFER_MAX_SIZE"):
            try:
                self.buffer_max_size = int(buffer_max_size)
            except ValueError:
                logger.warning(f"Invalid buffer max size: {buffer_max_size}")

        # Logging
        if log_level := os.getenv("SCENEBEAT_LOG_LEVEL"):
            self.log_level = log_level.upper()

        if log_to_console := os.getenv("SCENEBEAT_LOG_TO_CONSOLE"):
            self.log_to_console = log_to_console.strip().lower() in _TRUTHY

        if log_file := os.getenv("SCENEBEAT_LOG_FILE"):
            self.log_file = Path(log_file)

    def validate(self) -> tuple[bool, list[str]]:
        """Validate the configuration.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        errors = []

        if not self.project_name:
            errors.append("Project name is required")

        if self.same_file_timeout < 0:
            errors.append("Same file timeout must not be negative")

        if self.branch_timeout <= 0:
            errors.append("Branch timeout must be positive")

        if self.buffer_max_size <= 0:
            errors.append("Buffer max size must be positive")

        return len(errors) == 0, errors


class ConfigManager:
    """Manages collector configuration."""

    def __init__(self):
        """Initialize configuration manager."""
        self._config: Optional[CollectorConfig] = None

    def load_config(
        self,
        project_name: Optional[str] = None,
        same_file_timeout: Optional[float] = None,
    ) -> CollectorConfig:
        """Load configuration with optional overrides.

        Args:
            project_name: Project name override
            same_file_timeout: Deduplication window override in seconds

        Returns:
            Configured CollectorConfig instance
        """
        config = CollectorConfig()

        # Apply parameter overrides
        if project_name:
            config.project_name = project_name

        if same_file_timeout is not None:
            config.same_file_timeout = same_file_timeout

        self._config = config
        return config

    def get_config(self) -> Optional[CollectorConfig]:
        """Get current configuration."""
        return self._config

    def validate_config(self) -> tuple[bool, list[str]]:
        """Validate current configuration.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        if not self._config:
            return False, ["No configuration loaded"]

        return self._config.validate()


# Global configuration manager instance
_config_manager = ConfigManager()


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager."""
    return _config_manager
