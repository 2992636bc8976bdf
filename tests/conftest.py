"""Pytest configuration and shared fixtures for the cursor pagination tests."""

import logging
import operator
from datetime import datetime, timezone
from typing import Any, Dict, List
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cursor_pagination.config import Settings
from cursor_pagination.errors import register_exception_handlers
from cursor_pagination.pagination import (
    And,
    Comparison,
    CursorParam,
    MatchAll,
    Or,
    Predicate,
    PaginatedResponse,
    build_page_filter,
    extract_sort_fields,
    paginate_query_results,
)


COMPARATORS = {"eq": operator.eq, "lt": operator.lt, "gt": operator.gt}


def evaluate(predicate: Predicate, item: Dict[str, Any]) -> bool:
    """Evaluate a predicate tree against an in-memory item."""
    if isinstance(predicate, MatchAll):
        return True
    if isinstance(predicate, Comparison):
        return COMPARATORS[predicate.op](item[predicate.field], predicate.value)
    if isinstance(predicate, And):
        return all(evaluate(c, item) for c in predicate.conditions)
    if isinstance(predicate, Or):
        return any(evaluate(c, item) for c in predicate.conditions)
    raise TypeError(f"Unknown predicate: {predicate!r}")


@pytest.fixture
def test_settings() -> Settings:
    """Settings used by unit tests."""
    return Settings(
        log_level="ERROR",
        cursor_temporal_fields=["created_at"],
        unique_sort_fields=False
    )


@pytest.fixture
def mock_settings(test_settings: Settings):
    """Patch the settings seen by the token codec."""
    with patch("cursor_pagination.pagination.tokens.get_settings", return_value=test_settings):
        yield test_settings


@pytest.fixture
def cursor_time() -> datetime:
    """Timestamp of the last item on a page."""
    return datetime(2024, 5, 17, 9, 30, 15, 250000, tzinfo=timezone.utc)


@pytest.fixture
def sample_items() -> List[Dict[str, Any]]:
    """Items ordered by created_at DESC, id DESC."""
    base = datetime(2024, 5, 17, 9, 0, 0, tzinfo=timezone.utc)
    items = [
        {"id": i, "title": f"Item {i}", "created_at": base.replace(minute=i)}
        for i in range(1, 8)
    ]
    items.sort(key=lambda x: (x["created_at"], x["id"]), reverse=True)
    return items


@pytest.fixture
def app(mock_settings: Settings, sample_items: List[Dict[str, Any]]) -> FastAPI:
    """Small app listing sample items by created_at DESC, id DESC."""
    app = FastAPI()
    register_exception_handlers(app)
    order_by = [{"created_at": "desc"}, {"id": "desc"}]
    
    @app.get("/items")
    def list_items(cursor: CursorParam, limit: int = 3) -> PaginatedResponse:
        predicate = build_page_filter(order_by, cursor, settings=mock_settings)
        rows = [item for item in sample_items if evaluate(predicate, item)]
        page, next_cursor, has_more = paginate_query_results(
            rows[:limit + 1], limit, extract_sort_fields(order_by)
        )
        return PaginatedResponse(items=page, next_cursor=next_cursor, has_more=has_more)
    
    @app.get("/boom")
    def boom():
        raise RuntimeError("database password is hunter2")
    
    return app


@pytest.fixture
def test_client(app: FastAPI) -> TestClient:
    """Test client that returns 500 responses instead of raising."""
    return TestClient(app, raise_server_exceptions=False)


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no I/O)")


def pytest_collection_modifyitems(config, items):
    """Mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


logging.getLogger("cursor_pagination").setLevel(logging.WARNING)
