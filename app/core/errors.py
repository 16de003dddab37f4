from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base class for failures raised by the employee store."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, error: str | None = None):
        super().__init__(message)
        self.message = message
        self.error = error


class NotFoundError(DomainError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found", error=f"No {entity.lower()} with id {entity_id!r}")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(DomainError):
    """Required fields are missing or empty."""

    def __init__(self, fields: list[str], message: str | None = None):
        super().__init__(
            message or f"Missing required fields: {', '.join(fields)}",
            error=f"Invalid fields: {', '.join(fields)}",
        )
        self.fields = list(fields)


class ConflictError(DomainError):
    """A unique field collides with an existing record."""

    def __init__(self, field: str, value: Any, entity: str = "Employee"):
        super().__init__(
            f"{entity} with this {field} already exists",
            error=f"{field} {value!r} is already in use",
        )
        self.field = field
        self.value = value


def error_body(message: str, error: str | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return body


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, type(exc).__name__, exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.error))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path"))
        problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    logger.warning("%s %s -> invalid request: %s", request.method, request.url.path, "; ".join(problems))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request", "; ".join(problems)),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = "Endpoint not found"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    cfg = getattr(request.app.state, "settings", settings)
    detail = str(exc) if cfg.expose_error_details else "Internal server error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Something went wrong!", detail),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
