from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime

from app.schemas.pagination import Pagination

class ReviewBase(BaseModel):
    student_name: Optional[str] = None
    rating: Optional[int] = None
    comment: Optional[str] = None

class ReviewCreate(ReviewBase):
    pass

class ReviewUpdate(ReviewBase):
    pass

class Review(BaseModel):
    id: int
    student_name: str
    rating: int
    comment: str
    date: datetime
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class ReviewPage(BaseModel):
    """Review listing with the site-wide rating summary."""
    items: List[Review]
    average_rating: float = Field(..., description="Mean rating over all reviews, one decimal")
    total_reviews: int
    pagination: Pagination

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
