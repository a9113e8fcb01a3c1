"""Events emitted by a calculator session."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class SessionEventType(str, Enum):
    """All event types emitted by a CalculatorSession."""

    # State lifecycle
    STATE_RESTORED = "state_restored"
    STATE_RESET = "state_reset"

    # Edits
    FIELD_CHANGED = "field_changed"
    OVERRIDE_APPLIED = "override_applied"

    # Recalculation
    RECALCULATED = "recalculated"

    # Display
    VIEW_MODE_CHANGED = "view_mode_changed"


@dataclass
class SessionEvent:
    """A single session notification."""

    event_type: SessionEventType
    data: dict[str, Any]
    sequence_id: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "event": self.event_type.value,
            "id": self.sequence_id,
            "timestamp": self.timestamp.isoformat(),
            **self.data,
        }
