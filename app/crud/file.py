from sqlalchemy import func
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.file import LessonFile
from app.schemas.file import LessonFileCreate, LessonFileUpdate

class CRUDLessonFile(CRUDBase[LessonFile, LessonFileCreate, LessonFileUpdate]):
    search_fields = ("name",)
    default_order = (LessonFile.created_at.desc(),)
    popular_order = (LessonFile.downloads.desc(),)

    def increment_downloads(self, db: Session, *, id: int) -> bool:
        return self.increment(db, id=id, field="downloads")

    def total_downloads(self, db: Session) -> int:
        return db.query(func.coalesce(func.sum(LessonFile.downloads), 0)).scalar() or 0

lesson_file = CRUDLessonFile(LessonFile)
