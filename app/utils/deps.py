from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Depends, Query
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.database import SessionLocal
from app.core.exceptions import UnauthorizedException
from app.models.user import User
from app.services.auth import auth_service

MAX_PAGE_SIZE = 100

http_bearer = HTTPBearer(auto_error=False)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer)
) -> str:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException("No token provided")
    return credentials.credentials

def get_current_user(
    db: Session = Depends(get_db),
    token: str = Depends(get_bearer_token)
) -> User:
    return auth_service.verify(db, token=token)

def get_optional_user(
    db: Session = Depends(get_db),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer)
) -> Optional[User]:
    if credentials is None or not credentials.credentials:
        return None
    return auth_service.verify(db, token=credentials.credentials)


@dataclass
class PageParams:
    page: int
    limit: int


def pagination(default_limit: int) -> Callable[..., PageParams]:
    """Build a dependency reading ``page`` and ``limit`` (or ``pageSize``)."""
    def _pagination(
        page: int = Query(1, ge=1),
        limit: Optional[int] = Query(None, ge=1, le=MAX_PAGE_SIZE),
        page_size: Optional[int] = Query(None, alias="pageSize", ge=1, le=MAX_PAGE_SIZE),
    ) -> PageParams:
        return PageParams(page=page, limit=limit or page_size or default_limit)
    return _pagination
