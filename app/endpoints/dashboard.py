from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.constants import AnalyticsPeriodEnum
from app.models.user import User
from app.schemas.dashboard import AnalyticsResponse, DashboardStats
from app.schemas.lesson import Lesson
from app.schemas.message import Message
from app.schemas.review import Review
from app.schemas.site_settings import SiteSettings, SiteSettingsUpdate
from app.schemas.video import Video
from app.services.dashboard import dashboard_service
from app.utils import deps

router = APIRouter()

RECENT_LIMIT = Query(5, ge=1, le=50)


@router.get("/stats", response_model=DashboardStats)
def get_stats(db: Session = Depends(deps.get_db), current_user: User = Depends(deps.get_current_user)):
    return dashboard_service.get_stats(db)


@router.get("/recent-messages", response_model=List[Message])
def get_recent_messages(
    limit: int = RECENT_LIMIT,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    return [Message.model_validate(m) for m in dashboard_service.get_recent_messages(db, limit=limit)]


@router.get("/recent-reviews", response_model=List[Review])
def get_recent_reviews(
    limit: int = RECENT_LIMIT,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    return [Review.model_validate(r) for r in dashboard_service.get_recent_reviews(db, limit=limit)]


@router.get("/popular-lessons", response_model=List[Lesson])
def get_popular_lessons(
    limit: int = RECENT_LIMIT,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    return [Lesson.model_validate(l) for l in dashboard_service.get_popular_lessons(db, limit=limit)]


@router.get("/popular-videos", response_model=List[Video])
def get_popular_videos(
    limit: int = RECENT_LIMIT,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    return [Video.model_validate(v) for v in dashboard_service.get_popular_videos(db, limit=limit)]


@router.get("/analytics", response_model=AnalyticsResponse)
def get_analytics(
    period: AnalyticsPeriodEnum = AnalyticsPeriodEnum.SEVEN_DAYS,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    """Creation histograms for lessons, videos and messages, oldest bucket first."""
    return dashboard_service.get_analytics(db, period=period)


@router.get("/settings", response_model=SiteSettings)
def get_settings(db: Session = Depends(deps.get_db)):
    """Public: the site reads its branding from here."""
    return SiteSettings.model_validate(dashboard_service.get_settings(db))


@router.put("/settings", response_model=SiteSettings)
def update_settings(
    *,
    db: Session = Depends(deps.get_db),
    settings_in: SiteSettingsUpdate,
    current_user: User = Depends(deps.get_current_user)
):
    return SiteSettings.model_validate(dashboard_service.update_settings(db, settings_in=settings_in))
