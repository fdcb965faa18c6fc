import logging
from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload
from typing import Any, List, Optional

from app.crud.base import CRUDBase
from app.models.lesson import Lesson
from app.models.video import Video
from app.models.file import LessonFile
from app.schemas.lesson import LessonCreate, LessonUpdate

logger = logging.getLogger(__name__)

class CRUDLesson(CRUDBase[Lesson, LessonCreate, LessonUpdate]):
    search_fields = ("title", "description")
    default_order = (Lesson.created_at.desc(),)

    def get_with_children(self, db: Session, id: Any) -> Optional[Lesson]:
        return (
            db.query(self.model)
            .options(selectinload(self.model.videos), selectinload(self.model.files))
            .filter(self.model.id == id)
            .first()
        )

    def get_popular(self, db: Session, *, limit: int = 5) -> List[Lesson]:
        return self.get_multi(db, limit=limit, order_by=(Lesson.video_count.desc(), Lesson.id.desc()))

    def recount_children(self, db: Session, *, lesson_id: Any) -> bool:
        """Recompute video_count and file_count from the child tables. Idempotent."""
        video_total = select(func.count(Video.id)).where(Video.lesson_id == lesson_id).scalar_subquery()
        file_total = select(func.count(LessonFile.id)).where(LessonFile.lesson_id == lesson_id).scalar_subquery()
        updated = (
            db.query(self.model)
            .filter(self.model.id == lesson_id)
            .update(
                {self.model.video_count: video_total, self.model.file_count: file_total},
                synchronize_session=False,
            )
        )
        db.commit()
        return updated > 0

    def delete_with_children(self, db: Session, *, id: Any) -> Optional[Lesson]:
        """Delete a lesson and its videos and files in a single transaction."""
        lesson = db.get(self.model, id)
        if not lesson:
            return None
        try:
            videos_removed = len(lesson.videos)
            files_removed = len(lesson.files)
            db.delete(lesson)
            db.commit()
        except Exception:
            db.rollback()
            raise
        logger.info(f"Deleted lesson {id} with {videos_removed} videos and {files_removed} files")
        return lesson

lesson = CRUDLesson(Lesson)
