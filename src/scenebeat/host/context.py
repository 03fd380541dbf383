from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class StaticHostContext:
    """HostContext backed by plain attributes.

    ``document_path`` is the project-relative scene path (``Assets/...``) or
    None for an unsaved scene; ``root`` is the absolute data directory.
    """

    root: str
    document_path: Optional[str] = None

    def active_document_path(self) -> Optional[str]:
        return self.document_path

    def data_root(self) -> str:
        return self.root
