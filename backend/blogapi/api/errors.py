"""Exception handlers translating the error taxonomy to JSON responses.

Body shape: {"error": "<ErrorClassName>", "detail": "<message>"}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blogapi.exceptions import BlogAPIError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def error_response(error: BlogAPIError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={"error": type(error).__name__, "detail": error.message},
    )


async def blog_api_error_handler(request: Request, exc: BlogAPIError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return error_response(exc)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as ValidationError (400)."""
    problems = []
    for error in exc.errors():
        location = ".".join(
            part for part in error["loc"] if isinstance(part, str) and part != "body"
        )
        problems.append(f"{location or 'body'}: {error['msg']}")

    message = "; ".join(problems) or "Invalid request body"
    return error_response(ValidationError(message))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BlogAPIError, blog_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
