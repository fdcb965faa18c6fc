from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime

from app.schemas.video import Video
from app.schemas.file import LessonFile

class LessonBase(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    level: Optional[str] = None
    thumbnail: Optional[str] = None

class LessonCreate(LessonBase):
    pass

class LessonUpdate(LessonBase):
    pass

class Lesson(LessonBase):
    id: int
    title: str
    level: str
    video_count: int = 0
    file_count: int = 0
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class LessonDetail(Lesson):
    videos: List[Video] = []
    files: List[LessonFile] = []
