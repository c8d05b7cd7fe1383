"""
Event model for status machines.

Events are opaque to the composer: it passes them through unchanged. This
model is what the replay runner and CLI produce from event files.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Event:
    """
    Immutable event record.

    Fields:
        type: Event kind (e.g., "FETCH_USERS", "FETCH_USERS_RESPONSE")
        payload: Event-specific data
        meta: Metadata (source, reason, etc.)
    """
    type: str
    payload: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Event":
        """
        Build an Event from a plain dict.

        Raises:
            ValueError: If "type" is missing or not a string
        """
        ev_type = data.get("type")
        if not isinstance(ev_type, str):
            raise ValueError(f"Event type must be a string, got {ev_type!r}")
        return Event(
            type=ev_type,
            payload=dict(data.get("payload") or {}),
            meta=dict(data.get("meta") or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "payload": dict(self.payload), "meta": dict(self.meta)}


def event_type(event: Any) -> Optional[str]:
    """
    Read the kind of an event.

    Works for Event instances, any object with a `type` attribute, and
    mappings with a "type" key. Returns None when no kind is found.
    """
    if event is None:
        return None
    if isinstance(event, Mapping):
        return event.get("type")
    return getattr(event, "type", None)
