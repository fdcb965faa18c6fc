from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.constants import SortEnum, VideoPlatformEnum
from app.models.user import User
from app.schemas.pagination import PaginatedResponse, Pagination
from app.schemas.response import APIResponse
from app.schemas.video import Video, VideoCreate, VideoUpdate
from app.services.video import video_service
from app.utils import deps

router = APIRouter()


@router.get("", response_model=PaginatedResponse[Video])
def list_videos(
    db: Session = Depends(deps.get_db),
    paging: deps.PageParams = Depends(deps.pagination(default_limit=20)),
    lesson_id: Optional[int] = None,
    platform: Optional[VideoPlatformEnum] = None,
    search: Optional[str] = Query(None, max_length=200),
    sort: SortEnum = SortEnum.RECENT,
):
    videos, total = video_service.list_videos(
        db,
        page=paging.page,
        limit=paging.limit,
        lesson_id=lesson_id,
        platform=platform.value if platform else None,
        search=search,
        sort=sort,
    )
    return PaginatedResponse[Video](
        items=[Video.model_validate(v) for v in videos],
        pagination=Pagination.build(page=paging.page, limit=paging.limit, total=total)
    )


@router.get("/{video_id}", response_model=Video)
def read_video(video_id: int, db: Session = Depends(deps.get_db)):
    return Video.model_validate(video_service.get_video(db, video_id))


@router.post("", response_model=Video, status_code=status.HTTP_201_CREATED)
def create_video(
    *,
    db: Session = Depends(deps.get_db),
    video_in: VideoCreate,
    current_user: User = Depends(deps.get_current_user)
):
    return Video.model_validate(video_service.create_video(db, video_in))


@router.put("/{video_id}/view", response_model=APIResponse[None])
def record_video_view(video_id: int, db: Session = Depends(deps.get_db)):
    video_service.record_view(db, video_id)
    return APIResponse(message="View count updated")


@router.put("/{video_id}", response_model=Video)
def update_video(
    *,
    db: Session = Depends(deps.get_db),
    video_id: int,
    video_in: VideoUpdate,
    current_user: User = Depends(deps.get_current_user)
):
    return Video.model_validate(video_service.update_video(db, video_id, video_in))


@router.delete("/{video_id}", response_model=APIResponse[None])
def delete_video(
    *,
    db: Session = Depends(deps.get_db),
    video_id: int,
    current_user: User = Depends(deps.get_current_user)
):
    video_service.delete_video(db, video_id)
    return APIResponse(message="Video deleted successfully")
