"""Helpers shared by the list filters."""

from typing import Any, Iterable, Optional

ALL = "all"


def active_filter(value: Any) -> Optional[Any]:
    """None and the "all" sentinel both mean "do not filter on this field"."""
    if value is None or value == ALL or value == "":
        return None
    return value


def matches_search(term: str, values: Iterable[Optional[str]]) -> bool:
    """Case-insensitive substring match against any of the values."""
    needle = term.lower()
    return any(value and needle in value.lower() for value in values)
