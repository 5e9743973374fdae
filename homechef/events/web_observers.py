"""Activity feed for planner events.

Subscribes to the GLOBAL_EVENT_BUS and keeps the most recent events in memory
so the API can serve them at /api/events. Clients poll with
since=<next_cursor> and only receive events with a larger id.

The feed is per process; nothing here is persisted.
"""
from __future__ import annotations
import logging
from collections import deque
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, Optional

from .Event_Bus import (
    GLOBAL_EVENT_BUS, RECIPE_VERSION_BUMPED, PLAN_GENERATED, PLAN_UNDONE, SHOPPING_REFRESHED
)

logger = logging.getLogger(__name__)

MAX_EVENTS = 300
WATCHED_EVENTS = (RECIPE_VERSION_BUMPED, PLAN_GENERATED, PLAN_UNDONE, SHOPPING_REFRESHED)


class ActivityFeed:
    def __init__(self, max_events: int = MAX_EVENTS):
        self._lock = Lock()
        self._events = deque(maxlen=max_events)
        self._last_id = 0

    def record(self, event_name: str, payload: Any) -> None:
        """EventBus callback: stamp the event with a cursor id and UTC time."""
        with self._lock:
            self._last_id += 1
            entry = {
                'id': self._last_id,
                'type': event_name,
                'ts': datetime.now(timezone.utc).isoformat(),
            }
            if isinstance(payload, dict):
                entry.update({k: v for k, v in payload.items() if k not in entry})
            self._events.append(entry)

    def since(self, cursor: Optional[int] = None) -> Dict[str, Any]:
        with self._lock:
            if cursor is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > cursor]
            next_cursor = self._last_id if self._events else (cursor or 0)
        return {'events': data, 'next_cursor': next_cursor}


FEED = ActivityFeed()
_started = False


def start():
    """Subscribe the feed once; later calls do nothing."""
    global _started
    if _started:
        return
    for name in WATCHED_EVENTS:
        GLOBAL_EVENT_BUS.subscribe(name, FEED.record)
    _started = True
    logger.info("Activity feed subscribed to %d planner events", len(WATCHED_EVENTS))


def get_events(since: Optional[int] = None) -> Dict[str, Any]:
    """Events newer than `since` (all buffered events when None) plus the cursor for the next poll."""
    return FEED.since(since)


__all__ = ['ActivityFeed', 'FEED', 'start', 'get_events']
