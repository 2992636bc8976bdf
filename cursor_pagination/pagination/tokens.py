"""Continuation token codec.

A token is the compact JSON object ``{"data": <marker>, "sort": <fields>}``
wrapped in URL-safe base64 with the padding stripped. The encoding only
makes the token opaque to casual inspection; it is not signed.
"""

import base64
import json
import logging
from datetime import datetime
from typing import Optional, Dict, Any, List, Iterable, Mapping, Sequence

from pydantic import BaseModel, Field, StrictStr

from ..config import get_settings
from ..errors.problem_details import InvalidCursorError
from .markers import split_marker_value

logger = logging.getLogger(__name__)

SCALAR_TYPES = (str, int, float, bool)


class DecodedCursor(BaseModel):
    """Position marker and sort fields carried by a continuation token."""
    
    data: Dict[str, Any] = Field(description="Field values of the last item on the previous page")
    sort: List[StrictStr] = Field(description="Sort field names, primary first")


def encode_cursor(marker: Optional[Mapping[str, Any]], sort: Sequence[str]) -> Optional[str]:
    """Encode a position marker and its sort fields into a continuation token.
    
    Args:
        marker: Field values of the last item on the current page
        sort: Sort field names, primary first
        
    Returns:
        URL-safe token, or None when there is no marker or no sort field
        
    Raises:
        ValueError: If the marker lacks a compared sort field or holds
            values that cannot be serialized
    """
    if not marker or not sort:
        return None
    
    # Only the first two sort fields take part in comparisons
    for field in sort[:2]:
        if field not in marker:
            raise ValueError(f"Failed to encode cursor: sort field '{field}' missing from marker")
    
    try:
        cursor_data = DecodedCursor(data=dict(marker), sort=list(sort))
        cursor_json = cursor_data.model_dump_json()
    except Exception as e:
        raise ValueError(f"Failed to encode cursor: {e}") from e
    
    encoded = base64.urlsafe_b64encode(cursor_json.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=")


def decode_cursor(
    token: Optional[str],
    temporal_fields: Optional[Iterable[str]] = None
) -> Optional[DecodedCursor]:
    """Decode a continuation token.
    
    Args:
        token: Token from the client, or None for the first page
        temporal_fields: Marker fields whose string values are restored as
            datetimes; defaults to the configured ``cursor_temporal_fields``
        
    Returns:
        Decoded cursor, or None when no token was supplied
        
    Raises:
        InvalidCursorError: If the token is malformed for any reason
    """
    if not token:
        return None
    
    if temporal_fields is None:
        temporal_fields = get_settings().cursor_temporal_fields
    
    try:
        cursor_bytes = _urlsafe_b64decode(token)
        cursor_dict = json.loads(cursor_bytes.decode("utf-8"))
        cursor = DecodedCursor.model_validate(cursor_dict)
        
        # Only the first two sort fields take part in comparisons
        for field in cursor.sort[:2]:
            if field not in cursor.data:
                raise ValueError(f"Sort field '{field}' missing from cursor data")
            _, value = split_marker_value(cursor.data[field])
            if not isinstance(value, SCALAR_TYPES):
                raise TypeError(f"Sort field '{field}' has non-scalar value {value!r}")
        
        for field in temporal_fields:
            if field in cursor.data:
                cursor.data[field] = _restore_temporal(cursor.data[field])
        
        return cursor
        
    except (ValueError, TypeError) as e:
        logger.warning(f"Cursor parsing error: {e}")
        raise InvalidCursorError() from e
    except Exception as e:
        logger.warning(f"Unexpected cursor parsing error: {type(e).__name__} - {e}")
        raise InvalidCursorError() from e


def _urlsafe_b64decode(token: str) -> bytes:
    padded = token + "=" * (-len(token) % 4)
    return base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)


def _parse_datetime(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _restore_temporal(value: Any) -> Any:
    if isinstance(value, str):
        return _parse_datetime(value)
    
    direction, inner = split_marker_value(value)
    if direction is not None and isinstance(inner, str):
        return {direction: _parse_datetime(inner)}
    return value
