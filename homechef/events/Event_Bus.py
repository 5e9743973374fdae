"""Simple Event Bus / Observer implementation for planner activity.

Event names used so far:
  recipe.version_bumped -> payload {"recipe_id": int, "title": str, "from_version": int, "to_version": int}
  plan.generated        -> payload {"start_date": str, "created": int, "dates": [str, ...]}
  plan.undone           -> payload {"restored": int, "remaining": int}
  shopping.refreshed    -> payload {"week_offset": int, "manual": int, "generated": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
RECIPE_VERSION_BUMPED = "recipe.version_bumped"
PLAN_GENERATED = "plan.generated"
PLAN_UNDONE = "plan.undone"
SHOPPING_REFRESHED = "shopping.refreshed"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception as e:
				logger.error("[EventBus] Error delivering %s to %s: %s", event_name, cb, e)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def create_event(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus (sugar function)."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'create_event',
	'RECIPE_VERSION_BUMPED', 'PLAN_GENERATED', 'PLAN_UNDONE', 'SHOPPING_REFRESHED'
]
