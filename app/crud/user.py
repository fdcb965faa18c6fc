from typing import Optional
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.user import User
from app.schemas.user import UserCreate

class CRUDUser(CRUDBase[User, UserCreate, UserCreate]):
    def get_by_email(self, db: Session, *, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    def has_any(self, db: Session) -> bool:
        return db.query(User.id).first() is not None

    def set_password_hash(self, db: Session, *, db_obj: User, password_hash: str) -> User:
        return self.update(db, db_obj=db_obj, obj_in={"password_hash": password_hash})

user = CRUDUser(User)
