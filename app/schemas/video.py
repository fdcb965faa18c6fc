from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from app.core.constants import VideoPlatformEnum

class VideoBase(BaseModel):
    title: Optional[str] = None
    url: Optional[str] = None
    platform: Optional[VideoPlatformEnum] = None
    duration: Optional[int] = Field(default=None, ge=0)  # seconds

    model_config = ConfigDict(use_enum_values=True)

class VideoCreate(VideoBase):
    lesson_id: Optional[int] = None

class VideoUpdate(VideoBase):
    pass

class Video(BaseModel):
    id: int
    lesson_id: int
    title: str
    url: str
    platform: str
    duration: Optional[int] = None
    views: int = 0
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
