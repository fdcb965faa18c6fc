from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.pagination import Pagination
from app.schemas.response import APIResponse
from app.schemas.review import Review, ReviewCreate, ReviewPage, ReviewUpdate
from app.services.review import review_service
from app.utils import deps

router = APIRouter()


@router.get("", response_model=ReviewPage)
def list_reviews(
    db: Session = Depends(deps.get_db),
    paging: deps.PageParams = Depends(deps.pagination(default_limit=10)),
    rating: Optional[int] = Query(None, ge=1, le=5),
    search: Optional[str] = Query(None, max_length=200),
):
    reviews, total = review_service.list_reviews(
        db, page=paging.page, limit=paging.limit, rating=rating, search=search
    )
    return ReviewPage(
        items=[Review.model_validate(r) for r in reviews],
        average_rating=review_service.get_average_rating(db),
        total_reviews=total,
        pagination=Pagination.build(page=paging.page, limit=paging.limit, total=total)
    )


@router.get("/{review_id}", response_model=Review)
def read_review(review_id: int, db: Session = Depends(deps.get_db)):
    return Review.model_validate(review_service.get_review(db, review_id))


@router.post("", response_model=Review, status_code=status.HTTP_201_CREATED)
def create_review(*, db: Session = Depends(deps.get_db), review_in: ReviewCreate):
    """Public: students leave reviews without an account."""
    return Review.model_validate(review_service.create_review(db, review_in))


@router.put("/{review_id}", response_model=Review)
def update_review(
    *,
    db: Session = Depends(deps.get_db),
    review_id: int,
    review_in: ReviewUpdate,
    current_user: User = Depends(deps.get_current_user)
):
    return Review.model_validate(review_service.update_review(db, review_id, review_in))


@router.delete("/{review_id}", response_model=APIResponse[None])
def delete_review(
    *,
    db: Session = Depends(deps.get_db),
    review_id: int,
    current_user: User = Depends(deps.get_current_user)
):
    review_service.delete_review(db, review_id)
    return APIResponse(message="Review deleted successfully")
