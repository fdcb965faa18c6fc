from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional

from app.schemas.user import User

class TokenPayload(BaseModel):
    user_id: int | None = None
    sub: str | None = None
    jti: str | None = None
    exp: int | None = None

class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class LoginResponse(BaseModel):
    """Response for the login endpoint."""
    message: str
    token: str
    token_type: str = "bearer"
    user: User

class RegisterResponse(BaseModel):
    message: str
    user: User

class ChangePasswordRequest(BaseModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
