from sqlalchemy.orm import Session
from typing import List, Optional

from app.crud.base import CRUDBase
from app.models.message import Message
from app.schemas.message import MessageCreate, MessageUpdate

class CRUDMessage(CRUDBase[Message, MessageCreate, MessageUpdate]):
    search_fields = ("student_name", "content")
    default_order = (Message.created_at.desc(),)

    def get_recent(self, db: Session, *, limit: int = 5) -> List[Message]:
        return self.get_multi(db, limit=limit, order_by=(Message.created_at.desc(), Message.id.desc()))

    def mark_read(self, db: Session, *, id: int) -> Optional[Message]:
        message = self.get(db, id=id)
        if not message:
            return None
        return self.update(db, db_obj=message, obj_in={"is_read": True})

message = CRUDMessage(Message)
