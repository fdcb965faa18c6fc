import logging
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestException, NotFoundException
from app.crud.message import message as crud_message
from app.models.message import Message
from app.schemas.message import MessageCreate, MessageUpdate
from app.utils.validation import is_blank, is_valid_email, require_fields

logger = logging.getLogger(__name__)

class MessageService:
    def list_messages(
        self, db: Session, *, page: int, limit: int, is_read: Optional[bool] = None, search: Optional[str] = None
    ) -> Tuple[List[Message], int]:
        return crud_message.get_page(db, page=page, limit=limit, filters={"is_read": is_read}, search=search)

    def get_message(self, db: Session, message_id: int) -> Message:
        message = crud_message.get(db, id=message_id)
        if not message:
            raise NotFoundException("Message not found")
        return message

    def _check_email(self, email: Optional[str]) -> None:
        if not is_blank(email) and not is_valid_email(email):
            raise BadRequestException("Invalid email format")

    def create_message(self, db: Session, message_in: MessageCreate) -> Message:
        require_fields(
            "Student name and content are required",
            student_name=message_in.student_name, content=message_in.content
        )
        self._check_email(message_in.email)
        data = message_in.model_dump(exclude_none=True)
        data["is_read"] = False
        message = crud_message.create(db, obj_in=data)
        logger.info(f"New contact message {message.id} from {message.student_name}")
        return message

    def update_message(self, db: Session, message_id: int, message_in: MessageUpdate) -> Message:
        self._check_email(message_in.email)
        message = self.get_message(db, message_id)
        return crud_message.update(db, db_obj=message, obj_in=message_in)

    def mark_read(self, db: Session, message_id: int) -> Message:
        message = crud_message.mark_read(db, id=message_id)
        if not message:
            raise NotFoundException("Message not found")
        return message

    def delete_message(self, db: Session, message_id: int) -> None:
        if not crud_message.delete(db, id=message_id):
            raise NotFoundException("Message not found")

message_service = MessageService()
