from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.lesson import Lesson, LessonCreate, LessonDetail, LessonUpdate
from app.schemas.pagination import PaginatedResponse, Pagination
from app.schemas.response import APIResponse
from app.services.lesson import lesson_service
from app.utils import deps

router = APIRouter()


@router.get("", response_model=PaginatedResponse[Lesson])
def list_lessons(
    db: Session = Depends(deps.get_db),
    paging: deps.PageParams = Depends(deps.pagination(default_limit=12)),
    level: Optional[str] = None,
    search: Optional[str] = Query(None, max_length=200),
):
    lessons, total = lesson_service.list_lessons(
        db, page=paging.page, limit=paging.limit, level=level, search=search
    )
    return PaginatedResponse[Lesson](
        items=[Lesson.model_validate(l) for l in lessons],
        pagination=Pagination.build(page=paging.page, limit=paging.limit, total=total)
    )


@router.get("/{lesson_id}", response_model=LessonDetail)
def read_lesson(lesson_id: int, db: Session = Depends(deps.get_db)):
    """Lesson with its videos and files, both oldest first."""
    return LessonDetail.model_validate(lesson_service.get_lesson(db, lesson_id))


@router.post("", response_model=Lesson, status_code=status.HTTP_201_CREATED)
def create_lesson(
    *,
    db: Session = Depends(deps.get_db),
    lesson_in: LessonCreate,
    current_user: User = Depends(deps.get_current_user)
):
    return Lesson.model_validate(lesson_service.create_lesson(db, lesson_in))


@router.put("/{lesson_id}", response_model=Lesson)
def update_lesson(
    *,
    db: Session = Depends(deps.get_db),
    lesson_id: int,
    lesson_in: LessonUpdate,
    current_user: User = Depends(deps.get_current_user)
):
    return Lesson.model_validate(lesson_service.update_lesson(db, lesson_id, lesson_in))


@router.delete("/{lesson_id}", response_model=APIResponse[None])
def delete_lesson(
    *,
    db: Session = Depends(deps.get_db),
    lesson_id: int,
    current_user: User = Depends(deps.get_current_user)
):
    lesson_service.delete_lesson(db, lesson_id)
    return APIResponse(message="Lesson deleted successfully")


@router.post("/{lesson_id}/recount", response_model=LessonDetail)
def recount_lesson_children(
    *,
    db: Session = Depends(deps.get_db),
    lesson_id: int,
    current_user: User = Depends(deps.get_current_user)
):
    """Recompute video_count and file_count from the stored videos and files."""
    return LessonDetail.model_validate(lesson_service.recount_children(db, lesson_id))
