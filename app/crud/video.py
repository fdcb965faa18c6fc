from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List

from app.crud.base import CRUDBase
from app.models.video import Video
from app.schemas.video import VideoCreate, VideoUpdate

class CRUDVideo(CRUDBase[Video, VideoCreate, VideoUpdate]):
    search_fields = ("title",)
    default_order = (Video.created_at.desc(),)
    popular_order = (Video.views.desc(),)

    def get_popular(self, db: Session, *, limit: int = 5) -> List[Video]:
        return self.get_multi(db, limit=limit, order_by=(Video.views.desc(), Video.id.desc()))

    def increment_views(self, db: Session, *, id: int) -> bool:
        return self.increment(db, id=id, field="views")

    def total_views(self, db: Session) -> int:
        return db.query(func.coalesce(func.sum(Video.views), 0)).scalar() or 0

video = CRUDVideo(Video)
