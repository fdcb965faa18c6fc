from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

class SiteSettingsUpdate(BaseModel):
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    hero_title: Optional[str] = None
    hero_description: Optional[str] = None
    teacher_name: Optional[str] = None
    teacher_subject: Optional[str] = None
    teacher_photo: Optional[str] = None

class SiteSettings(SiteSettingsUpdate):
    primary_color: str
    secondary_color: str
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
