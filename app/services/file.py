import logging
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from app.core.constants import FileTypeEnum, SortEnum
from app.core.exceptions import NotFoundException
from app.crud.file import lesson_file as crud_file
from app.models.file import LessonFile
from app.schemas.file import LessonFileCreate, LessonFileUpdate
from app.services.lesson import lesson_service
from app.utils.validation import require_fields

logger = logging.getLogger(__name__)

class LessonFileService:
    def list_files(
        self,
        db: Session,
        *,
        page: int,
        limit: int,
        lesson_id: Optional[int] = None,
        file_type: Optional[str] = None,
        search: Optional[str] = None,
        sort: SortEnum = SortEnum.RECENT,
    ) -> Tuple[List[LessonFile], int]:
        order_by = crud_file.popular_order if sort == SortEnum.POPULAR else ()
        return crud_file.get_page(
            db,
            page=page,
            limit=limit,
            filters={"lesson_id": lesson_id, "type": file_type},
            search=search,
            order_by=order_by,
        )

    def get_file(self, db: Session, file_id: int) -> LessonFile:
        lesson_file = crud_file.get(db, id=file_id)
        if not lesson_file:
            raise NotFoundException("File not found")
        return lesson_file

    def create_file(self, db: Session, file_in: LessonFileCreate) -> LessonFile:
        require_fields(
            "Lesson ID, name, and URL are required",
            lesson_id=file_in.lesson_id, name=file_in.name, url=file_in.url
        )
        lesson_service.ensure_exists(db, file_in.lesson_id)

        data = file_in.model_dump(exclude_none=True)
        data.setdefault("type", FileTypeEnum.PDF.value)
        data.setdefault("size", 0)
        data["downloads"] = 0
        lesson_file = crud_file.create(db, obj_in=data)

        lesson_service.refresh_child_counts(db, lesson_file.lesson_id)
        logger.info(f"Created file {lesson_file.id} for lesson {lesson_file.lesson_id}")
        return lesson_file

    def update_file(self, db: Session, file_id: int, file_in: LessonFileUpdate) -> LessonFile:
        lesson_file = self.get_file(db, file_id)
        return crud_file.update(db, db_obj=lesson_file, obj_in=file_in)

    def delete_file(self, db: Session, file_id: int) -> None:
        lesson_file = self.get_file(db, file_id)
        lesson_id = lesson_file.lesson_id
        crud_file.delete(db, id=file_id)
        lesson_service.refresh_child_counts(db, lesson_id)

    def record_download(self, db: Session, file_id: int) -> None:
        if not crud_file.increment_downloads(db, id=file_id):
            raise NotFoundException("File not found")

file_service = LessonFileService()
