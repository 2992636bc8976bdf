"""Sort field extraction from ``order_by`` specifications."""

from typing import Any, Dict, List, Mapping, Sequence, Tuple

from .markers import DIRECTIONS


def _entry_item(entry: Any) -> Tuple[str, Any]:
    if not isinstance(entry, Mapping) or len(entry) != 1:
        raise ValueError(f"Order entry must map exactly one field to a direction: {entry!r}")
    return next(iter(entry.items()))


def extract_sort_fields(order_by: Sequence[Mapping[str, Any]], unique: bool = False) -> List[str]:
    """Turn ``[{"created_at": "desc"}, {"id": "asc"}]`` into ``["created_at", "id"]``.
    
    Field order and names are preserved exactly. Repeated fields are kept
    unless ``unique`` is set, in which case they are rejected.
    """
    fields = [_entry_item(entry)[0] for entry in order_by]
    
    if unique:
        seen = set()
        for field in fields:
            if field in seen:
                raise ValueError(f"Duplicate sort field: '{field}'")
            seen.add(field)
    
    return fields


def extract_sort_order(order_by: Sequence[Mapping[str, Any]]) -> Dict[str, str]:
    """Map each sort field to its lower-cased direction, keeping field order.
    
    A repeated field keeps the direction of its first occurrence.
    """
    order: Dict[str, str] = {}
    for entry in order_by:
        field, direction = _entry_item(entry)
        direction = str(direction).lower()
        if direction not in DIRECTIONS:
            raise ValueError(f"Sort direction for '{field}' must be 'asc' or 'desc', got {direction!r}")
        order.setdefault(field, direction)
    return order
