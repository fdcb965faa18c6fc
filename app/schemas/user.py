from pydantic import BaseModel, EmailStr, ConfigDict
from typing import Optional
from datetime import datetime

class UserBase(BaseModel):
    """Profile fields shared by the tutor account schemas."""
    name: Optional[str] = None
    bio: Optional[str] = None
    photo_url: Optional[str] = None
    subject: Optional[str] = None

class UserCreate(UserBase):
    """Registration body; required fields are checked by the auth service."""
    email: Optional[EmailStr] = None
    password: Optional[str] = None

class User(UserBase):
    """Main user schema for reading user data. Never exposes the hash."""
    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
