"""Web-facing observers for planning events.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - plan.generated
  - pantry.depleted

and stores a lightweight in-memory ring buffer of recent events that the
web layer can poll (since=<last_id_seen>) to show what recent generation
runs produced.

Each event is stored with an auto-increment integer id (cursor). A lock
guards the buffer because uvicorn may serve requests from worker threads.
MAX_EVENTS caps memory use.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from meal_assistant.utilities.config import MAX_EVENTS
from .Event_Bus import GLOBAL_EVENT_BUS, PANTRY_DEPLETED, PLAN_GENERATED

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_started = False

_FIELDS = ('total_slots', 'filled_slots', 'warnings', 'remaining_slots', 'start_date', 'end_date')


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
        }
        if isinstance(payload, dict):
            for k in _FIELDS:
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    GLOBAL_EVENT_BUS.subscribe(PLAN_GENERATED, _record)
    GLOBAL_EVENT_BUS.subscribe(PANTRY_DEPLETED, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
