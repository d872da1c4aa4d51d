"""
Classified application errors and their HTTP mapping.

Every kind carries a fixed HTTP status, a symbolic code and a message. The
JSON body sent to clients is `{"StatusCode", "ErrorCode", "Message"}`.
Anything that is not an `AppError` is unclassified; the HTTP layer turns it
into `UnexpectedError`.
"""

from __future__ import annotations

import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    BAD_REQUEST = "BAD_REQUEST"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    APPLICATION_ERROR = "APPLICATION_ERROR"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: ErrorCode = ErrorCode.UNEXPECTED_ERROR
    message: str = "unexpected error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {
            "StatusCode": self.status_code,
            "ErrorCode": self.error_code.value,
            "Message": self.message,
        }


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = ErrorCode.BAD_REQUEST
    message = "something is wrong within your request"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = ErrorCode.RESOURCE_NOT_FOUND
    message = "resource not found"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = ErrorCode.APPLICATION_ERROR
    message = "application internal error"


class UnexpectedError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = ErrorCode.UNEXPECTED_ERROR
    message = "unexpected error"


def error_response(exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def _app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return error_response(exc)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed JSON and wrong field types both land here.
    logger.info("bad_request path=%s errors=%s", request.url.path, exc.errors())
    return error_response(BadRequestError())


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error path=%s", request.url.path, exc_info=exc)
    return error_response(UnexpectedError())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
