from __future__ import annotations

import json

from ..core.enums import EventKind, WorkStatus
from ..core.exceptions import EventFormatError
from .model import DayBoundary, Error, EventOver, EventStart, Info, StatusChange, WorkEvent


def encode_event(event: WorkEvent) -> str:
    """Serialize an event to the JSON payload stored in ``events.event_json``."""

    payload: dict = {"type": event.kind.value}
    if isinstance(event, StatusChange):
        payload.update(
            member_id=event.member_id,
            member_name=event.member_name,
            status=event.new_status.value,
        )
    elif isinstance(event, (Info, Error)):
        payload["text"] = event.text
    return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def decode_event(raw: str) -> WorkEvent:
    try:
        payload = json.loads(raw)
        kind = EventKind(payload["type"])
    except (ValueError, TypeError, KeyError) as e:
        raise EventFormatError(f"Cannot decode event payload {raw!r}: {e}") from e

    try:
        if kind == EventKind.STATUS_CHANGE:
            return StatusChange(
                member_id=int(payload["member_id"]),
                member_name=str(payload["member_name"]),
                new_status=WorkStatus(payload["status"]),
            )
        if kind == EventKind.DAY_BOUNDARY:
            return DayBoundary()
        if kind == EventKind.EVENT_START:
            return EventStart()
        if kind == EventKind.EVENT_OVER:
            return EventOver()
        if kind == EventKind.INFO:
            return Info(str(payload["text"]))
        return Error(str(payload["text"]))
    except (ValueError, TypeError, KeyError) as e:
        raise EventFormatError(f"Malformed {kind.value} event {raw!r}: {e}") from e
