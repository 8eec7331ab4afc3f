"""Interface layer error responses."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned for every handled error."""

    message: str


class ValidationErrorResponse(ErrorResponse):
    """Body returned when request input fails validation."""

    errors: list[dict] = []


class ContentRejectedResponse(ErrorResponse):
    """Body returned when moderation denies a comment."""

    toxicity: dict[str, float] | None = None
