"""Dashboard aggregation: statistics, recent/popular listings and analytics."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from app.core.constants import AnalyticsPeriodEnum
from app.crud.file import lesson_file as crud_file
from app.crud.lesson import lesson as crud_lesson
from app.crud.message import message as crud_message
from app.crud.review import review as crud_review
from app.crud.site_settings import site_settings as crud_site_settings
from app.crud.video import video as crud_video
from app.models.lesson import Lesson
from app.models.message import Message
from app.models.review import Review
from app.models.site_settings import SiteSettings
from app.models.video import Video
from app.schemas.dashboard import AnalyticsBucket, AnalyticsResponse, DashboardStats
from app.schemas.site_settings import SiteSettingsUpdate

logger = logging.getLogger(__name__)

# period -> (number of buckets, bucket width)
PERIOD_BUCKETS: Dict[AnalyticsPeriodEnum, Tuple[int, timedelta]] = {
    AnalyticsPeriodEnum.ONE_DAY: (24, timedelta(hours=1)),
    AnalyticsPeriodEnum.SEVEN_DAYS: (7, timedelta(days=1)),
    AnalyticsPeriodEnum.THIRTY_DAYS: (30, timedelta(days=1)),
}


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def period_window(period: AnalyticsPeriodEnum, now: datetime) -> Tuple[datetime, int, timedelta]:
    """Return the window start, bucket count and bucket width for ``period``."""
    bucket_count, width = PERIOD_BUCKETS[period]
    return now - bucket_count * width, bucket_count, width


def build_buckets(
    timestamps: Iterable[datetime], period: AnalyticsPeriodEnum, now: datetime
) -> List[AnalyticsBucket]:
    """Count timestamps into equal-width buckets covering ``[now - period, now]``.

    The result is dense and chronological: index 0 is the oldest bucket and
    every bucket is present even when empty. Hourly buckets are labelled
    ``HH:00``; daily buckets by the ISO date on which they start.
    """
    now = _as_utc(now)
    start, bucket_count, width = period_window(period, now)
    counts = [0] * bucket_count

    for ts in timestamps:
        ts = _as_utc(ts)
        if ts < start or ts > now:
            continue
        index = min(int((ts - start) // width), bucket_count - 1)
        counts[index] += 1

    buckets = []
    for index, count in enumerate(counts):
        bucket_start = start + index * width
        if width < timedelta(days=1):
            label = f"{bucket_start.hour:02d}:00"
        else:
            label = bucket_start.date().isoformat()
        buckets.append(AnalyticsBucket(index=index, date=label, start=bucket_start, count=count))
    return buckets


class DashboardService:
    def get_stats(self, db: Session) -> DashboardStats:
        return DashboardStats(
            lessons=crud_lesson.count(db),
            videos=crud_video.count(db),
            files=crud_file.count(db),
            reviews=crud_review.count(db),
            messages=crud_message.count(db),
            unread_messages=crud_message.count(db, filters={"is_read": False}),
            total_views=crud_video.total_views(db),
            total_downloads=crud_file.total_downloads(db),
            average_rating=crud_review.get_average_rating(db),
        )

    def get_recent_messages(self, db: Session, *, limit: int = 5) -> List[Message]:
        return crud_message.get_recent(db, limit=limit)

    def get_recent_reviews(self, db: Session, *, limit: int = 5) -> List[Review]:
        return crud_review.get_recent(db, limit=limit)

    def get_popular_lessons(self, db: Session, *, limit: int = 5) -> List[Lesson]:
        return crud_lesson.get_popular(db, limit=limit)

    def get_popular_videos(self, db: Session, *, limit: int = 5) -> List[Video]:
        return crud_video.get_popular(db, limit=limit)

    def _created_since(self, db: Session, model, cutoff: datetime) -> List[datetime]:
        rows = db.query(model.created_at).filter(model.created_at >= cutoff).all()
        return [row[0] for row in rows]

    def get_analytics(
        self, db: Session, *, period: AnalyticsPeriodEnum, now: Optional[datetime] = None
    ) -> AnalyticsResponse:
        now = _as_utc(now or datetime.now(timezone.utc))
        cutoff, _, _ = period_window(period, now)

        lessons = self._created_since(db, Lesson, cutoff)
        videos = self._created_since(db, Video, cutoff)
        messages = self._created_since(db, Message, cutoff)
        logger.debug(
            f"Analytics {period.value}: {len(lessons)} lessons, {len(videos)} videos, {len(messages)} messages"
        )

        return AnalyticsResponse(
            period=period.value,
            lessons=build_buckets(lessons, period, now),
            videos=build_buckets(videos, period, now),
            messages=build_buckets(messages, period, now),
            total_lessons=len(lessons),
            total_videos=len(videos),
            total_messages=len(messages),
        )

    def get_settings(self, db: Session) -> SiteSettings:
        return crud_site_settings.get_settings(db)

    def update_settings(self, db: Session, *, settings_in: SiteSettingsUpdate) -> SiteSettings:
        updated = crud_site_settings.update_settings(db, obj_in=settings_in)
        logger.info("Site settings updated")
        return updated

dashboard_service = DashboardService()
