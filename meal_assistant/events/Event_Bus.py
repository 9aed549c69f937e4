"""Simple Event Bus / Observer implementation for meal planning events.

Event names used so far:
  pantry.item_used_up -> payload {"ingredient_id", "name", "original_quantity", "unit"}
  pantry.depleted     -> payload {"remaining_slots": int}
  plan.generated      -> payload {"total_slots", "filled_slots", "warnings", ...}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PANTRY_ITEM_USED_UP = "pantry.item_used_up"
PANTRY_DEPLETED = "pantry.depleted"
PLAN_GENERATED = "plan.generated"


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
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS',
	'PANTRY_ITEM_USED_UP', 'PANTRY_DEPLETED', 'PLAN_GENERATED'
]
