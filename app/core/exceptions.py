from typing import Any, Dict, Optional

from fastapi import HTTPException, status

from app.core.constants import ErrorCodeEnum


class AppException(HTTPException):
    """HTTPException that carries an explicit error kind for clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: ErrorCodeEnum = ErrorCodeEnum.INTERNAL_SERVER_ERROR

    def __init__(self, detail: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=self.status_code, detail=detail)
        self.details = details


class BadRequestException(AppException):
    status_code = status.HTTP_400_BAD_REQUEST
    code = ErrorCodeEnum.BAD_REQUEST


class UnauthorizedException(AppException):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = ErrorCodeEnum.UNAUTHORIZED

    def __init__(self, detail: str = "Invalid token", details: Optional[Dict[str, Any]] = None):
        super().__init__(detail, details)
        self.headers = {"WWW-Authenticate": "Bearer"}


class NotFoundException(AppException):
    status_code = status.HTTP_404_NOT_FOUND
    code = ErrorCodeEnum.NOT_FOUND


class ConflictException(AppException):
    status_code = status.HTTP_409_CONFLICT
    code = ErrorCodeEnum.CONFLICT
