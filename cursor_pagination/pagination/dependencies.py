"""FastAPI dependencies for cursor query parameters."""

from typing import Annotated, Optional

from fastapi import Depends, Query

from .tokens import DecodedCursor, decode_cursor


def get_cursor(
    cursor: Optional[str] = Query(
        default=None,
        description="Continuation token returned as next_cursor by the previous page"
    )
) -> Optional[DecodedCursor]:
    """Decode the ``cursor`` query parameter, None on the first page."""
    return decode_cursor(cursor)


CursorParam = Annotated[Optional[DecodedCursor], Depends(get_cursor)]
