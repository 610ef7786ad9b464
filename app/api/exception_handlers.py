"""Conversion of greetings errors into JSON error responses."""

from datetime import datetime
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from infrastructure.logging import get_module_logger
from modules.greetings.errors import (
    InvalidParameterError,
    LanguageNotSupportedError,
    MissingParameterError,
)

logger = get_module_logger()

TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M:%S"
UNEXPECTED_ERROR_MESSAGE = "Unexpected error"


class ApiError(BaseModel):
    """Error body returned by every failed API call."""

    status: str
    timestamp: str = Field(
        default_factory=lambda: datetime.now().strftime(TIMESTAMP_FORMAT)
    )
    message: str
    debug_message: str = Field(default="", serialization_alias="debugMessage")

    @classmethod
    def of(cls, status: HTTPStatus, message: str, debug_message: str = "") -> "ApiError":
        return cls(status=status.name, message=message, debug_message=debug_message)


def error_response(status: HTTPStatus, message: str, debug_message: str = "") -> JSONResponse:
    body = ApiError.of(status, message, debug_message)
    return JSONResponse(
        status_code=status.value,
        content=body.model_dump(by_alias=True),
    )


async def missing_parameter_handler(request: Request, exc: Exception):
    if isinstance(exc, MissingParameterError):
        logger.warning(
            "missing_parameter", parameter=exc.name, path=request.url.path
        )
        return error_response(HTTPStatus.BAD_REQUEST, str(exc))


async def invalid_parameter_handler(request: Request, exc: Exception):
    if isinstance(exc, InvalidParameterError):
        logger.warning(
            "invalid_parameter",
            parameter=exc.name,
            value=str(exc.value),
            path=request.url.path,
        )
        return error_response(HTTPStatus.BAD_REQUEST, str(exc))


async def language_not_supported_handler(request: Request, exc: Exception):
    if isinstance(exc, LanguageNotSupportedError):
        logger.warning(
            "language_not_supported_response",
            language=exc.language,
            path=request.url.path,
        )
        return error_response(HTTPStatus.NOT_FOUND, str(exc))


async def unexpected_error_handler(request: Request, exc: Exception):
    """Last resort for anything the specific handlers do not cover."""
    logger.exception(
        "unexpected_error", error=str(exc), path=request.url.path
    )
    return error_response(
        HTTPStatus.INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE, str(exc)
    )


def setup_exception_handlers(app: FastAPI):
    """
    Register the error handlers on the FastAPI application.
    """
    app.add_exception_handler(MissingParameterError, missing_parameter_handler)
    app.add_exception_handler(InvalidParameterError, invalid_parameter_handler)
    app.add_exception_handler(LanguageNotSupportedError, language_not_supported_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
