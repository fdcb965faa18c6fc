from typing import Dict, Optional
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.constants import ErrorCodeEnum
from app.core.exceptions import AppException
from app.middleware.logging import REQUEST_ID_HEADER, resolve_request_id
from app.schemas.response import ErrorResponse
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

def _get_error_code(status_code: int) -> str:
    code_map = {
        400: ErrorCodeEnum.BAD_REQUEST,
        401: ErrorCodeEnum.UNAUTHORIZED,
        403: ErrorCodeEnum.FORBIDDEN,
        404: ErrorCodeEnum.NOT_FOUND,
        405: ErrorCodeEnum.METHOD_NOT_ALLOWED,
        409: ErrorCodeEnum.CONFLICT,
        422: ErrorCodeEnum.VALIDATION_ERROR,
        500: ErrorCodeEnum.INTERNAL_SERVER_ERROR,
    }
    code = code_map.get(status_code)
    return code.value if code else f"HTTP_{status_code}"

def _error_body(request: Request, *, error: str, code: str, **extra) -> dict:
    return ErrorResponse(
        error=error,
        code=code,
        timestamp=datetime.now(timezone.utc).isoformat(),
        path=request.url.path,
        request_id=resolve_request_id(request),
        **extra
    ).model_dump(exclude_none=True)

def _error_response(status_code: int, body: dict, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body,
        headers={**(headers or {}), REQUEST_ID_HEADER: body["request_id"]}
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = _error_body(
        request,
        error="Request validation failed",
        code=ErrorCodeEnum.VALIDATION_ERROR.value,
        details={"validation_errors": jsonable_encoder(exc.errors())}
    )
    logger.warning(f"[{body['request_id']}] Validation error: {exc.errors()}")
    return _error_response(status.HTTP_400_BAD_REQUEST, body)

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc, AppException):
        code = exc.code.value
        details = exc.details
    else:
        code = _get_error_code(exc.status_code)
        details = None

    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        message = "Route not found"

    body = _error_body(request, error=message, code=code, details=details)
    logger.warning(f"[{body['request_id']}] HTTP {exc.status_code}: {message}")
    return _error_response(exc.status_code, body, getattr(exc, "headers", None))

async def persistence_exception_handler(request: Request, exc: SQLAlchemyError):
    body = _error_body(
        request,
        error="Database operation failed",
        code=ErrorCodeEnum.PERSISTENCE_ERROR.value,
        message=str(exc)
    )
    logger.error(f"[{body['request_id']}] Persistence error: {exc}", exc_info=True)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, body)

async def global_exception_handler(request: Request, exc: Exception):
    body = _error_body(
        request,
        error="Something went wrong!",
        code=ErrorCodeEnum.INTERNAL_SERVER_ERROR.value,
        message=str(exc),
        details={"error_type": type(exc).__name__}
    )
    logger.error(f"[{body['request_id']}] Unhandled exception: {exc}", exc_info=True)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, body)
