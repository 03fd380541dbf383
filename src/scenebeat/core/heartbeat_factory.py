"""Builds heartbeats from the current editor state."""

from __future__ import annotations

from typing import Optional, Protocol

from loguru import logger

from .events import ENTITY_TYPE_FILE, LANGUAGE_UNITY, UNSAVED_SCENE, Heartbeat
from .vcs import BranchResolver

ASSETS_PREFIX = "Assets/"


class HostContext(Protocol):
    """Protocol for querying what is currently open in the host."""

    def active_document_path(self) -> Optional[str]:
        """Project-relative path of the active scene, empty if unsaved."""
        ...

    def data_root(self) -> str:
        """Absolute path of the project's data (Assets) directory."""
        ...


class HeartbeatFactory:
    """Creates heartbeats for a single project."""

    def __init__(self, project_name: str, branch_resolver: BranchResolver):
        """Initialize heartbeat factory.

        Args:
            project_name: Project name stamped on every heartbeat
            branch_resolver: Resolver used to look up the current branch
        """
        self.project_name = project_name
        self.branch_resolver = branch_resolver

    def create(self, host: HostContext) -> Heartbeat:
        """Create a heartbeat for the host's active document."""
        data_root = self._query_data_root(host)

        branch = None
        if data_root is not None:
            branch = self.branch_resolver.resolve(data_root)

        return Heartbeat(
            entity=self._resolve_entity(host, data_root),
            entity_type=ENTITY_TYPE_FILE,
            project=self.project_name,
            language=LANGUAGE_UNITY,
            branch=branch,
        )

    def _resolve_entity(self, host: HostContext, data_root: Optional[str]) -> str:
        try:
            document_path = host.active_document_path()
        except Exception as e:
            logger.warning(f"Could not read active document path: {e}")
            return UNSAVED_SCENE

        if not document_path or data_root is None:
            return UNSAVED_SCENE

        if document_path.startswith(ASSETS_PREFIX):
            document_path = document_path[len(ASSETS_PREFIX) :]

        return data_root.rstrip("/") + "/" + document_path

    def _query_data_root(self, host: HostContext) -> Optional[str]:
        try:
            data_root = host.data_root()
        except Exception as e:
            logger.warning(f"Could not read data root: {e}")
            return None

        return data_root or None
