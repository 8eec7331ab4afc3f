"""Exception handlers mapping domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from agora.config import Settings
from agora.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    ConflictError,
    ContentRejectedError,
    DomainError,
    ModerationUnavailableError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from agora.interface.error import (
    ContentRejectedResponse,
    ErrorResponse,
    ValidationErrorResponse,
)

# Checked in order, so subclasses must come before their bases
DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ModerationUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (ContentRejectedError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
]


def status_for(exc: DomainError) -> int:
    """HTTP status code for a domain error (500 when unmapped)."""
    for error_type, status_code in DOMAIN_ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _validation_details(errors) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in err.get("loc", [])),
            "message": err.get("msg", "Invalid value"),
        }
        for err in errors
    ]


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Register handlers turning errors into ``{message, ...}`` bodies.

    Args:
        app: FastAPI application
        settings: Application settings (``debug`` exposes 500 details)
    """

    @app.exception_handler(ContentRejectedError)
    async def content_rejected_handler(
        request: Request, exc: ContentRejectedError
    ) -> JSONResponse:
        """Moderation denied the text: 400 with the scorer's breakdown."""
        body = ContentRejectedResponse(message=str(exc), toxicity=exc.scores)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(),
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        """Map domain errors onto their HTTP status codes."""
        status_code = status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logfire.error(
                "Domain error",
                error_type=type(exc).__name__,
                error=str(exc),
                path=request.url.path,
                method=request.method,
            )
        else:
            logfire.info(
                "Request failed",
                error_type=type(exc).__name__,
                status_code=status_code,
                path=request.url.path,
            )

        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(message=str(exc)).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed path, query or body input."""
        logfire.warn(
            "Request validation error",
            errors=str(exc.errors()),
            path=request.url.path,
            method=request.method,
        )
        body = ValidationErrorResponse(
            message="Validation error", errors=_validation_details(exc.errors())
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(),
        )

    @app.exception_handler(PydanticValidationError)
    async def model_validation_handler(
        request: Request, exc: PydanticValidationError
    ) -> JSONResponse:
        """Use case request models rejecting route input."""
        logfire.warn(
            "Use case request validation error",
            errors=str(exc.errors()),
            path=request.url.path,
        )
        body = ValidationErrorResponse(
            message="Validation error", errors=_validation_details(exc.errors())
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Framework HTTP errors (unknown route, wrong method, ...)."""
        message = (
            str(exc.detail)
            if exc.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR
            else "Internal server error"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(message=message).model_dump(),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all: log everything, expose details only in debug mode."""
        logfire.exception(
            "Unhandled exception",
            error_type=type(exc).__name__,
            error=str(exc),
            path=request.url.path,
            method=request.method,
        )

        message = (
            f"{type(exc).__name__}: {exc}"
            if settings.debug
            else "An unexpected error occurred. Please try again later."
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(message=message).model_dump(),
        )
