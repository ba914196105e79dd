"""Review API exceptions and the handlers that turn them into JSON responses."""

from typing import Any, Callable

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.requests import Request
from fastapi.responses import JSONResponse

REVIEW_NOT_FOUND_MESSAGE = "Review not found"


class BookReviewException(Exception):
    """This is the base class for all book review errors"""

    pass


class ReviewNotFound(BookReviewException):
    """No review matches the given id."""

    def __init__(self, review_id: str | None = None):
        self.review_id = review_id
        super().__init__(REVIEW_NOT_FOUND_MESSAGE)


class ReviewValidationError(BookReviewException):
    """A write was rejected because of missing or out-of-range fields."""

    def __init__(self, errors: list):
        self.errors = errors
        details = ", ".join(f"{error.field}: {error.message}" for error in errors)
        super().__init__(f"Review validation failed: {details}")


class ReviewRequestFailed(BookReviewException):
    """Unexpected failure while serving a request, reported with the given status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


def create_exception_handler(status_code: int, initial_detail: Any) -> Callable[[Request, Exception], JSONResponse]:
    async def exception_handler(request: Request, exc: BookReviewException):
        return JSONResponse(content=initial_detail, status_code=status_code)

    return exception_handler


async def validation_error_handler(request: Request, exc: ReviewValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": str(exc),
            "errors": [{"field": error.field, "message": error.message} for error in exc.errors],
        },
    )


async def request_failed_handler(request: Request, exc: ReviewRequestFailed):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def malformed_request_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'] if part != 'body')}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": f"Invalid request: {details}"},
    )


def register_all_errors(app: FastAPI):
    # Review Not Found
    app.add_exception_handler(
        ReviewNotFound,
        create_exception_handler(
            status_code=status.HTTP_404_NOT_FOUND,
            initial_detail={"message": REVIEW_NOT_FOUND_MESSAGE},
        ),
    )

    # Review Validation Failed
    app.add_exception_handler(ReviewValidationError, validation_error_handler)

    # Store faults surfaced by the endpoints
    app.add_exception_handler(ReviewRequestFailed, request_failed_handler)

    # Malformed bodies are a 400, not FastAPI's default 422
    app.add_exception_handler(RequestValidationError, malformed_request_handler)
