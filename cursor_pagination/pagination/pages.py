"""Page assembly: next-page tokens, Link headers and page filters."""

from typing import Optional, Dict, Any, List, Mapping, Sequence, Tuple
from urllib.parse import urlencode

from pydantic import BaseModel, Field

from ..config import Settings, get_settings
from ..errors.problem_details import InvalidCursorError
from .predicates import MatchAll, Predicate, build_range_predicate
from .sorting import extract_sort_fields, extract_sort_order
from .tokens import DecodedCursor, encode_cursor


class PaginatedResponse(BaseModel):
    """Response model for paginated data."""
    
    items: List[Any] = Field(description="List of items")
    next_cursor: Optional[str] = Field(default=None, description="Cursor for next page")
    has_more: bool = Field(description="Whether more items are available")


def build_position_marker(record: Any, sort: Sequence[str]) -> Dict[str, Any]:
    """Collect the sort field values of a record (mapping or object)."""
    if isinstance(record, Mapping):
        return {field: record[field] for field in sort}
    return {field: getattr(record, field) for field in sort}


def paginate_query_results(
    items: List[Any],
    limit: int,
    sort: Sequence[str]
) -> Tuple[List[Any], Optional[str], bool]:
    """Process query results for pagination.
    
    Args:
        items: Items from the query, fetched with ``limit + 1``
        limit: Requested page size
        sort: Sort field names used by the query
        
    Returns:
        Tuple of (page_items, next_cursor, has_more)
    """
    has_more = len(items) > limit
    page_items = items[:limit]
    
    next_cursor = None
    if has_more and page_items:
        marker = build_position_marker(page_items[-1], sort)
        next_cursor = encode_cursor(marker, sort)
    
    return page_items, next_cursor, has_more


def build_page_filter(
    order_by: Sequence[Mapping[str, Any]],
    cursor: Optional[DecodedCursor],
    settings: Optional[Settings] = None
) -> Predicate:
    """Build the range predicate for the page that follows ``cursor``.
    
    Args:
        order_by: Ordering of the current request, e.g. ``[{"created_at": "desc"}]``
        cursor: Decoded token, or None on the first page
        settings: Settings override
        
    Returns:
        Predicate to combine with the query's own filters
        
    Raises:
        InvalidCursorError: If the token was issued for a different ordering
    """
    if cursor is None:
        return MatchAll()
    
    settings = settings or get_settings()
    sort = extract_sort_fields(order_by, unique=settings.unique_sort_fields)
    if cursor.sort != sort:
        raise InvalidCursorError()
    
    return build_range_predicate(cursor.data, sort, order=extract_sort_order(order_by))


def create_link_header(
    base_url: str,
    params: Dict[str, Any],
    next_cursor: Optional[str] = None
) -> Optional[str]:
    """Create Link header for pagination as per RFC 8288.
    
    Args:
        base_url: Base URL for the resource
        params: Current query parameters
        next_cursor: Cursor for next page
        
    Returns:
        Link header value or None if there is no next page
    """
    if not next_cursor:
        return None
    
    next_params = {k: v for k, v in params.items() if v is not None}
    next_params["cursor"] = next_cursor
    return f'<{base_url}?{urlencode(next_params)}>; rel="next"'
