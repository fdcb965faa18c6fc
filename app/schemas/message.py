from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

class MessageCreate(BaseModel):
    student_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    content: Optional[str] = None

class MessageUpdate(BaseModel):
    student_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    content: Optional[str] = None
    is_read: Optional[bool] = None

class Message(BaseModel):
    id: int
    student_name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    content: str
    is_read: bool = False
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
