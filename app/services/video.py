import logging
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from app.core.constants import SortEnum, VideoPlatformEnum
from app.core.exceptions import NotFoundException
from app.crud.video import video as crud_video
from app.models.video import Video
from app.schemas.video import VideoCreate, VideoUpdate
from app.services.lesson import lesson_service
from app.utils.validation import require_fields

logger = logging.getLogger(__name__)

class VideoService:
    def list_videos(
        self,
        db: Session,
        *,
        page: int,
        limit: int,
        lesson_id: Optional[int] = None,
        platform: Optional[str] = None,
        search: Optional[str] = None,
        sort: SortEnum = SortEnum.RECENT,
    ) -> Tuple[List[Video], int]:
        order_by = crud_video.popular_order if sort == SortEnum.POPULAR else ()
        return crud_video.get_page(
            db,
            page=page,
            limit=limit,
            filters={"lesson_id": lesson_id, "platform": platform},
            search=search,
            order_by=order_by,
        )

    def get_video(self, db: Session, video_id: int) -> Video:
        video = crud_video.get(db, id=video_id)
        if not video:
            raise NotFoundException("Video not found")
        return video

    def create_video(self, db: Session, video_in: VideoCreate) -> Video:
        require_fields(
            "Lesson ID, title, and URL are required",
            lesson_id=video_in.lesson_id, title=video_in.title, url=video_in.url
        )
        lesson_service.ensure_exists(db, video_in.lesson_id)

        data = video_in.model_dump(exclude_none=True)
        data.setdefault("platform", VideoPlatformEnum.YOUTUBE.value)
        data["views"] = 0
        video = crud_video.create(db, obj_in=data)

        lesson_service.refresh_child_counts(db, video.lesson_id)
        logger.info(f"Created video {video.id} for lesson {video.lesson_id}")
        return video

    def update_video(self, db: Session, video_id: int, video_in: VideoUpdate) -> Video:
        video = self.get_video(db, video_id)
        return crud_video.update(db, db_obj=video, obj_in=video_in)

    def delete_video(self, db: Session, video_id: int) -> None:
        video = self.get_video(db, video_id)
        lesson_id = video.lesson_id
        crud_video.delete(db, id=video_id)
        lesson_service.refresh_child_counts(db, lesson_id)

    def record_view(self, db: Session, video_id: int) -> None:
        if not crud_video.increment_views(db, id=video_id):
            raise NotFoundException("Video not found")

video_service = VideoService()
