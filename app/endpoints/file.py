from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.constants import FileTypeEnum, SortEnum
from app.models.user import User
from app.schemas.file import LessonFile, LessonFileCreate, LessonFileUpdate
from app.schemas.pagination import PaginatedResponse, Pagination
from app.schemas.response import APIResponse
from app.services.file import file_service
from app.utils import deps

router = APIRouter()


@router.get("", response_model=PaginatedResponse[LessonFile])
def list_files(
    db: Session = Depends(deps.get_db),
    paging: deps.PageParams = Depends(deps.pagination(default_limit=20)),
    lesson_id: Optional[int] = None,
    type: Optional[FileTypeEnum] = None,
    search: Optional[str] = Query(None, max_length=200),
    sort: SortEnum = SortEnum.RECENT,
):
    files, total = file_service.list_files(
        db,
        page=paging.page,
        limit=paging.limit,
        lesson_id=lesson_id,
        file_type=type.value if type else None,
        search=search,
        sort=sort,
    )
    return PaginatedResponse[LessonFile](
        items=[LessonFile.model_validate(f) for f in files],
        pagination=Pagination.build(page=paging.page, limit=paging.limit, total=total)
    )


@router.get("/{file_id}", response_model=LessonFile)
def read_file(file_id: int, db: Session = Depends(deps.get_db)):
    return LessonFile.model_validate(file_service.get_file(db, file_id))


@router.post("", response_model=LessonFile, status_code=status.HTTP_201_CREATED)
def create_file(
    *,
    db: Session = Depends(deps.get_db),
    file_in: LessonFileCreate,
    current_user: User = Depends(deps.get_current_user)
):
    return LessonFile.model_validate(file_service.create_file(db, file_in))


@router.put("/{file_id}/download", response_model=APIResponse[None])
def record_file_download(file_id: int, db: Session = Depends(deps.get_db)):
    file_service.record_download(db, file_id)
    return APIResponse(message="Download count updated")


@router.put("/{file_id}", response_model=LessonFile)
def update_file(
    *,
    db: Session = Depends(deps.get_db),
    file_id: int,
    file_in: LessonFileUpdate,
    current_user: User = Depends(deps.get_current_user)
):
    return LessonFile.model_validate(file_service.update_file(db, file_id, file_in))


@router.delete("/{file_id}", response_model=APIResponse[None])
def delete_file(
    *,
    db: Session = Depends(deps.get_db),
    file_id: int,
    current_user: User = Depends(deps.get_current_user)
):
    file_service.delete_file(db, file_id)
    return APIResponse(message="File deleted successfully")
