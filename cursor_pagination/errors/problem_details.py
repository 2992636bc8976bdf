"""Problem Details (RFC 9457) errors raised by the pagination layer."""

from typing import Optional, Any
from pydantic import BaseModel, Field
from fastapi import Request
from fastapi.responses import JSONResponse


INVALID_CURSOR_MESSAGE = "invalid cursor value"


class ProblemDetail(BaseModel):
    """Problem Details body as defined in RFC 9457."""
    
    type: str = Field(default="about:blank", description="A URI reference that identifies the problem type")
    title: str = Field(description="A short, human-readable summary of the problem type")
    status: int = Field(description="The HTTP status code")
    detail: Optional[str] = Field(default=None, description="A human-readable explanation specific to this occurrence")
    instance: Optional[str] = Field(default=None, description="A URI reference that identifies the specific occurrence")
    
    # Extension members
    model_config = {"extra": "allow"}


class ProblemDetailException(Exception):
    """Base exception for errors rendered as Problem Details."""
    
    def __init__(
        self,
        status: int,
        title: str,
        detail: Optional[str] = None,
        type_uri: str = "about:blank",
        instance: Optional[str] = None,
        **extensions: Any
    ):
        self.status = status
        self.title = title
        self.detail = detail
        self.type_uri = type_uri
        self.instance = instance
        self.extensions = extensions
        super().__init__(detail or title)
    
    def to_problem_detail(self, request: Optional[Request] = None) -> ProblemDetail:
        """Convert to a ProblemDetail model, using the request path as instance."""
        instance = self.instance
        if instance is None and request:
            instance = str(request.url.path)
        
        return ProblemDetail(
            type=self.type_uri,
            title=self.title,
            status=self.status,
            detail=self.detail,
            instance=instance,
            **self.extensions
        )
    
    def to_response(self, request: Optional[Request] = None) -> JSONResponse:
        """Convert to an application/problem+json response."""
        problem = self.to_problem_detail(request)
        return JSONResponse(
            status_code=self.status,
            content=problem.model_dump(exclude_none=True),
            media_type="application/problem+json"
        )


class BadRequestError(ProblemDetailException):
    """400 Bad Request error."""
    
    def __init__(self, detail: str, **extensions: Any):
        super().__init__(
            status=400,
            title="Bad Request",
            detail=detail,
            **extensions
        )


class InvalidCursorError(BadRequestError):
    """400 raised for any continuation token that cannot be decoded.
    
    The detail is fixed so that the reason a token was rejected never
    reaches the client; the cause is kept on ``__cause__`` for logging.
    """
    
    def __init__(self, **extensions: Any):
        super().__init__(INVALID_CURSOR_MESSAGE, **extensions)


def create_problem_response(
    status: int,
    title: str,
    detail: Optional[str] = None,
    type_uri: str = "about:blank",
    instance: Optional[str] = None,
    request: Optional[Request] = None,
    **extensions: Any
) -> JSONResponse:
    """Create a Problem Details response without raising."""
    exc = ProblemDetailException(
        status=status,
        title=title,
        detail=detail,
        type_uri=type_uri,
        instance=instance,
        **extensions
    )
    return exc.to_response(request)
