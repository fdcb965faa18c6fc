import logging
from typing import List, Optional, Tuple
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.constants import LessonLevelEnum
from app.core.exceptions import NotFoundException
from app.crud.lesson import lesson as crud_lesson
from app.models.lesson import Lesson
from app.schemas.lesson import LessonCreate, LessonUpdate
from app.utils.validation import require_fields

logger = logging.getLogger(__name__)

class LessonService:
    def list_lessons(
        self, db: Session, *, page: int, limit: int, level: Optional[str] = None, search: Optional[str] = None
    ) -> Tuple[List[Lesson], int]:
        if level == LessonLevelEnum.ALL.value:
            level = None
        return crud_lesson.get_page(db, page=page, limit=limit, filters={"level": level}, search=search)

    def get_lesson(self, db: Session, lesson_id: int) -> Lesson:
        lesson = crud_lesson.get_with_children(db, id=lesson_id)
        if not lesson:
            raise NotFoundException("Lesson not found")
        return lesson

    def ensure_exists(self, db: Session, lesson_id: int) -> None:
        if not crud_lesson.exists(db, id=lesson_id):
            raise NotFoundException("Lesson not found")

    def create_lesson(self, db: Session, lesson_in: LessonCreate) -> Lesson:
        require_fields("Title and level are required", title=lesson_in.title, level=lesson_in.level)
        data = lesson_in.model_dump(exclude_none=True)
        data.update(video_count=0, file_count=0)
        lesson = crud_lesson.create(db, obj_in=data)
        logger.info(f"Created lesson {lesson.id}")
        return lesson

    def update_lesson(self, db: Session, lesson_id: int, lesson_in: LessonUpdate) -> Lesson:
        lesson = crud_lesson.get(db, id=lesson_id)
        if not lesson:
            raise NotFoundException("Lesson not found")
        return crud_lesson.update(db, db_obj=lesson, obj_in=lesson_in)

    def delete_lesson(self, db: Session, lesson_id: int) -> None:
        if not crud_lesson.delete_with_children(db, id=lesson_id):
            raise NotFoundException("Lesson not found")

    def recount_children(self, db: Session, lesson_id: int) -> Lesson:
        if not crud_lesson.recount_children(db, lesson_id=lesson_id):
            raise NotFoundException("Lesson not found")
        return self.get_lesson(db, lesson_id)

    def refresh_child_counts(self, db: Session, lesson_id: int) -> None:
        """Recount after a child write. A failure here never undoes that write."""
        try:
            crud_lesson.recount_children(db, lesson_id=lesson_id)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.warning(f"Could not recount children of lesson {lesson_id}: {exc}")

lesson_service = LessonService()
