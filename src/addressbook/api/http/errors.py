"""Exception handlers rendering every failure as ``{"errors": message}``."""

from collections.abc import Iterable
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from src.addressbook.core.exceptions import AppError, Conflict, InternalError
from src.addressbook.core.models.web import ErrorResponse

# Documented error bodies shared by the API routers
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"errors": message})


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    return ".".join(parts) if parts else "request body"


def format_validation_error(error: dict[str, Any]) -> str:
    """Turn one pydantic error into a short sentence about the offending field."""
    field = _field_name(error.get("loc", ()))
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type == "missing":
        return f"{field} is required"
    if error_type == "string_too_short":
        if ctx.get("min_length") == 1:
            return f"{field} is required"
        return f"{field} must be at least {ctx.get('min_length')} characters"
    if error_type == "string_too_long":
        return f"{field} must be at most {ctx.get('max_length')} characters"
    if error_type == "json_invalid":
        return "request body is not valid JSON"
    if error_type == "value_error" and "email" in str(error.get("msg", "")):
        return f"{field} must be a valid email"
    return f"{field} is invalid"


def format_validation_errors(errors: Iterable[dict[str, Any]]) -> str:
    return "; ".join(format_validation_error(error) for error in errors)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = format_validation_errors(exc.errors())
    logger.warning("Rejected request body: {}", message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("Constraint violation: {}", exc.orig)
    return error_response(Conflict.status_code, "Resource conflicts with existing data")


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.opt(exception=exc).error("Unhandled database error")
    return error_response(InternalError.status_code, InternalError.default_message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error("Unhandled error")
    return error_response(InternalError.status_code, InternalError.default_message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(IntegrityError, integrity_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
