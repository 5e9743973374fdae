"""Event helper utilities.

Helper functions for publishing planner events on the global event bus.

Quick import:
    from homechef.events.event_helpers import (
        publish_version_bumped, publish_plan_generated, publish_plan_undone, publish_shopping_refreshed
    )
"""
from __future__ import annotations
from typing import Iterable

from .Event_Bus import (
    create_event,
    RECIPE_VERSION_BUMPED, PLAN_GENERATED, PLAN_UNDONE, SHOPPING_REFRESHED,
)

__all__ = [
    'publish_version_bumped', 'publish_plan_generated', 'publish_plan_undone', 'publish_shopping_refreshed',
]


def publish_version_bumped(recipe, from_version: int):
    """Publish a recipe.version_bumped event."""
    create_event(RECIPE_VERSION_BUMPED, {
        'recipe_id': recipe.id,
        'title': recipe.title,
        'from_version': from_version,
        'to_version': recipe.version,
    })


def publish_plan_generated(start_date, items: Iterable):
    """Publish a plan.generated event.

    Payload structure:
        {
          'start_date': 'YYYY-MM-DD',
          'created': <int>,
          'dates': ['YYYY-MM-DD', ...]
        }
    """
    items_list = list(items)
    create_event(PLAN_GENERATED, {
        'start_date': start_date.isoformat(),
        'created': len(items_list),
        'dates': [i.date.isoformat() for i in items_list],
    })


def publish_plan_undone(restored: int, remaining: int):
    create_event(PLAN_UNDONE, {'restored': restored, 'remaining': remaining})


def publish_shopping_refreshed(week_offset: int, items: Iterable):
    items_list = list(items)
    manual = sum(1 for i in items_list if i.is_manually_added)
    create_event(SHOPPING_REFRESHED, {
        'week_offset': week_offset,
        'manual': manual,
        'generated': len(items_list) - manual,
    })
