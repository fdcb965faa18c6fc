from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from app.core.constants import FileTypeEnum

class LessonFileBase(BaseModel):
    name: Optional[str] = None
    url: Optional[str] = None
    type: Optional[FileTypeEnum] = None
    size: Optional[int] = Field(default=None, ge=0)  # bytes

    model_config = ConfigDict(use_enum_values=True)

class LessonFileCreate(LessonFileBase):
    lesson_id: Optional[int] = None

class LessonFileUpdate(LessonFileBase):
    pass

class LessonFile(BaseModel):
    id: int
    lesson_id: int
    name: str
    url: str
    type: str
    size: int = 0
    downloads: int = 0
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
