"""Pagination module for cursor-based pagination."""

from .tokens import DecodedCursor, encode_cursor, decode_cursor
from .sorting import extract_sort_fields, extract_sort_order
from .predicates import (
    Predicate,
    MatchAll,
    Comparison,
    And,
    Or,
    build_range_predicate
)
from .pages import (
    PaginatedResponse,
    build_position_marker,
    paginate_query_results,
    build_page_filter,
    create_link_header
)
from .dependencies import get_cursor, CursorParam

__all__ = [
    "DecodedCursor",
    "encode_cursor",
    "decode_cursor",
    "extract_sort_fields",
    "extract_sort_order",
    "Predicate",
    "MatchAll",
    "Comparison",
    "And",
    "Or",
    "build_range_predicate",
    "PaginatedResponse",
    "build_position_marker",
    "paginate_query_results",
    "build_page_filter",
    "create_link_header",
    "get_cursor",
    "CursorParam"
]
