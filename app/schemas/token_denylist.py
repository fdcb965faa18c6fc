from pydantic import BaseModel
from datetime import datetime

class TokenDenylistCreate(BaseModel):
    jti: str
    exp: datetime
