from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.message import Message, MessageCreate, MessageUpdate
from app.schemas.pagination import PaginatedResponse, Pagination
from app.schemas.response import APIResponse
from app.services.message import message_service
from app.utils import deps

router = APIRouter()


@router.post("", response_model=APIResponse[Message], status_code=status.HTTP_201_CREATED)
def create_message(*, db: Session = Depends(deps.get_db), message_in: MessageCreate):
    """Public contact form."""
    message = message_service.create_message(db, message_in)
    return APIResponse(message="Message sent successfully", data=Message.model_validate(message))


@router.get("", response_model=PaginatedResponse[Message])
def list_messages(
    db: Session = Depends(deps.get_db),
    paging: deps.PageParams = Depends(deps.pagination(default_limit=20)),
    is_read: Optional[bool] = None,
    search: Optional[str] = Query(None, max_length=200),
    current_user: User = Depends(deps.get_current_user)
):
    messages, total = message_service.list_messages(
        db, page=paging.page, limit=paging.limit, is_read=is_read, search=search
    )
    return PaginatedResponse[Message](
        items=[Message.model_validate(m) for m in messages],
        pagination=Pagination.build(page=paging.page, limit=paging.limit, total=total)
    )


@router.get("/{message_id}", response_model=Message)
def read_message(
    message_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    return Message.model_validate(message_service.get_message(db, message_id))


@router.put("/{message_id}/read", response_model=Message)
def mark_message_read(
    message_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    return Message.model_validate(message_service.mark_read(db, message_id))


@router.put("/{message_id}", response_model=Message)
def update_message(
    *,
    db: Session = Depends(deps.get_db),
    message_id: int,
    message_in: MessageUpdate,
    current_user: User = Depends(deps.get_current_user)
):
    return Message.model_validate(message_service.update_message(db, message_id, message_in))


@router.delete("/{message_id}", response_model=APIResponse[None])
def delete_message(
    message_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    message_service.delete_message(db, message_id)
    return APIResponse(message="Message deleted successfully")
