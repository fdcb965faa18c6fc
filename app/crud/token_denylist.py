from datetime import datetime
from sqlalchemy.orm import Session
from app.crud.base import CRUDBase
from app.models.token_denylist import TokenDenylist
from app.schemas.token_denylist import TokenDenylistCreate
from typing import Optional

class CRUDTokenDenylist(CRUDBase[TokenDenylist, TokenDenylistCreate, TokenDenylistCreate]):
    def get_by_jti(self, db: Session, *, jti: str) -> Optional[TokenDenylist]:
        return db.query(self.model).filter(self.model.jti == jti).first()

    def purge_expired(self, db: Session, *, now: datetime) -> int:
        """Drop entries whose token could no longer be used anyway."""
        removed = db.query(self.model).filter(self.model.exp < now).delete(synchronize_session=False)
        db.commit()
        return removed

token_denylist = CRUDTokenDenylist(TokenDenylist)
