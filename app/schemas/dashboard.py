from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List
from datetime import datetime

class DashboardStats(BaseModel):
    lessons: int = 0
    videos: int = 0
    files: int = 0
    reviews: int = 0
    messages: int = 0
    unread_messages: int = 0
    total_views: int = 0
    total_downloads: int = 0
    average_rating: float = 0

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class AnalyticsBucket(BaseModel):
    index: int
    date: str
    start: datetime
    count: int = 0

class AnalyticsResponse(BaseModel):
    period: str
    lessons: List[AnalyticsBucket]
    videos: List[AnalyticsBucket]
    messages: List[AnalyticsBucket]
    total_lessons: int
    total_videos: int
    total_messages: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
