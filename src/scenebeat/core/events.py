"""Heartbeat record and the host activity signals that produce it.

Signals flow through the collector: Host Signal → Subscriber → Factory → Deduplicator → Listeners
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

UNSAVED_SCENE = "Unsaved Scene"
ENTITY_TYPE_FILE = "file"
LANGUAGE_UNITY = "Unity"
CATEGORY_CODING = "coding"


class ActivitySignal(str, Enum):
    """Editor notifications that count as user activity."""

    PLAY_MODE_STATE_CHANGED = "play_mode_state_changed"
    CONTEXTUAL_PROPERTY_MENU = "contextual_property_menu"
    HIERARCHY_CHANGED = "hierarchy_changed"
    SCENE_SAVED = "scene_saved"
    SCENE_OPENED = "scene_opened"
    SCENE_CLOSING = "scene_closing"
    NEW_SCENE_CREATED = "new_scene_created"


#: Signals whose heartbeat is marked as a write
WRITE_SIGNALS = frozenset({ActivitySignal.SCENE_SAVED})


class Heartbeat(BaseModel):
    """A single unit of user activity on one entity."""

    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True, extra="forbid")

    entity: str = Field(..., min_length=1, description="Absolute scene path or the unsaved scene sentinel")
    entity_type: str = Field(default=ENTITY_TYPE_FILE, min_length=1, description="Kind of entity")
    project: str = Field(..., min_length=1, description="Project name from collector configuration")
    language: str = Field(default=LANGUAGE_UNITY, description="Host category tag")
    branch: Optional[str] = Field(None, description="Version-control branch at creation time")
    is_write: bool = Field(default=False, description="True when triggered by a save")
    timestamp: datetime = Field(default_factory=datetime.now, description="Creation time")

    def to_dict(self) -> Dict[str, Any]:
        """Convert heartbeat to the collector API payload."""
        return {
            "entity": self.entity,
            "type": self.entity_type,
            "category": CATEGORY_CODING,
            "time": self.timestamp.timestamp(),
            "project": self.project,
            "language": self.language,
            "branch": self.branch,
            "is_write": self.is_write,
        }
