"""Error handling module for cursor pagination."""

from .problem_details import (
    INVALID_CURSOR_MESSAGE,
    ProblemDetail,
    ProblemDetailException,
    BadRequestError,
    InvalidCursorError,
    create_problem_response
)
from .handlers import register_exception_handlers

__all__ = [
    "INVALID_CURSOR_MESSAGE",
    "ProblemDetail",
    "ProblemDetailException",
    "BadRequestError",
    "InvalidCursorError",
    "create_problem_response",
    "register_exception_handlers"
]
