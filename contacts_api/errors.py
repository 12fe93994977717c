"""
Ієрархія помилок застосунку та їх обробники для FastAPI.

Кожна помилка відповідає у форматі ``{"errors": "повідомлення"}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ResponseError(Exception):
    """Базова помилка, яка має HTTP статус та повідомлення для клієнта."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ResponseError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(ResponseError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFound(ResponseError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str):
        super().__init__(f"{resource} is not found")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"errors": message})


def format_validation_errors(errors) -> str:
    """
    Збирає помилки pydantic в один рядок.

    :param errors: Список помилок з ``RequestValidationError.errors()``.
    :return: Повідомлення виду ``"username: String should have at least 1 character"``.
    """
    messages = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "header")]
        field = ".".join(location)
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(messages)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ResponseError)
    async def handle_response_error(request: Request, exc: ResponseError):
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = format_validation_errors(exc.errors())
        logger.warning("%s %s -> 400: %s", request.method, request.url.path, message)
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unhandled(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
