"""
Lifecycle hooks for automatic timestamps.

Inserts always get fresh created_at/updated_at values (caller-supplied ones
are overwritten), updates always refresh updated_at.
"""

from typing import Iterable

from sqlalchemy import event

from recruiter_ai.utils.time import utc_now


def stamp_on_create(mapper, connection, target) -> None:
    now = utc_now()
    target.created_at = now
    target.updated_at = now


def stamp_on_update(mapper, connection, target) -> None:
    target.updated_at = utc_now()


def register_timestamp_hooks(models: Iterable[type]) -> None:
    """Attach the create/update stamping listeners to each model class."""
    for model in models:
        if event.contains(model, "before_insert", stamp_on_create):
            continue
        event.listen(model, "before_insert", stamp_on_create)
        event.listen(model, "before_update", stamp_on_update)
