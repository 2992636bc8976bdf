"""Position marker helpers shared by the token codec and predicate builder."""

from typing import Any, Mapping, Optional, Tuple

DIRECTIONS = ("asc", "desc")


def split_marker_value(value: Any) -> Tuple[Optional[str], Any]:
    """Split a marker value into ``(direction, comparison_value)``.
    
    Markers may embed the sort direction in a field value as
    ``{"desc": value}``. Anything else is a raw comparison value and
    carries no direction.
    """
    if isinstance(value, Mapping) and len(value) == 1:
        direction, inner = next(iter(value.items()))
        if direction in DIRECTIONS:
            return direction, inner
    return None, value


def marker_entry(marker: Optional[Mapping[str, Any]], field: str) -> Tuple[Optional[str], Any]:
    """Look up ``field`` in a marker and split its value."""
    if not marker or field not in marker:
        raise ValueError(f"Position marker has no value for sort field '{field}'")
    return split_marker_value(marker[field])
