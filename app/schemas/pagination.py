import math
from typing import Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, *, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=math.ceil(total / limit) if limit else 0)

class PaginatedResponse(BaseModel, Generic[T]):
    items: List[T]
    pagination: Pagination
