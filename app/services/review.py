from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException
from app.crud.review import review as crud_review
from app.models.review import Review
from app.schemas.review import ReviewCreate, ReviewUpdate
from app.utils.validation import require_fields, validate_rating

class ReviewService:
    def list_reviews(
        self, db: Session, *, page: int, limit: int, rating: Optional[int] = None, search: Optional[str] = None
    ) -> Tuple[List[Review], int]:
        return crud_review.get_page(db, page=page, limit=limit, filters={"rating": rating}, search=search)

    def get_average_rating(self, db: Session) -> float:
        return crud_review.get_average_rating(db)

    def get_review(self, db: Session, review_id: int) -> Review:
        review = crud_review.get(db, id=review_id)
        if not review:
            raise NotFoundException("Review not found")
        return review

    def create_review(self, db: Session, review_in: ReviewCreate) -> Review:
        require_fields(
            "Student name, rating, and comment are required",
            student_name=review_in.student_name, rating=review_in.rating, comment=review_in.comment
        )
        validate_rating(review_in.rating)
        return crud_review.create(db, obj_in=review_in.model_dump(exclude_none=True))

    def update_review(self, db: Session, review_id: int, review_in: ReviewUpdate) -> Review:
        if review_in.rating is not None:
            validate_rating(review_in.rating)
        review = self.get_review(db, review_id)
        return crud_review.update(db, db_obj=review, obj_in=review_in)

    def delete_review(self, db: Session, review_id: int) -> None:
        if not crud_review.delete(db, id=review_id):
            raise NotFoundException("Review not found")

review_service = ReviewService()
