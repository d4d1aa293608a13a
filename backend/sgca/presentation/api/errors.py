"""Exception handlers that translate domain and framework errors into the envelope.

Routes never catch errors themselves; every failure reaches the client as
``{success: false, message, errors?}`` through the handlers registered here.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sgca.application.schemas import ApiErrorResponse
from sgca.domain.exceptions import DomainError, DomainValidationError, ErrorKind

logger = logging.getLogger(__name__)

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_STATE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
}

# Location prefixes FastAPI puts in front of the offending field name.
_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header", "cookie"})

_HTTP_MESSAGES: dict[int, str] = {
    status.HTTP_404_NOT_FOUND: "Recurso no encontrado",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Método no permitido",
}


def _envelope(status_code: int, message: str, errors: dict[str, str] | None = None) -> JSONResponse:
    body = ApiErrorResponse(message=message, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
    )


def _field_errors(exc: RequestValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
        field = ".".join(location) or "request"
        errors.setdefault(field, error.get("msg", "Valor no válido"))
    return errors


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = _STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    logger.info("%s %s → %d: %s", request.method, request.url.path, status_code, exc.message)
    errors = exc.errors if isinstance(exc, DomainValidationError) else None
    return _envelope(status_code, exc.message, errors)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _field_errors(exc)
    logger.info("%s %s → 400: %s", request.method, request.url.path, errors)
    return _envelope(status.HTTP_400_BAD_REQUEST, "Error de validación", errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = _envelope(exc.status_code, _HTTP_MESSAGES.get(exc.status_code, str(exc.detail)))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Error no controlado en %s %s", request.method, request.url.path)
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error interno del servidor")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
