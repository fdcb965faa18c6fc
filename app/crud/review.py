from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import List

from app.crud.base import CRUDBase
from app.models.review import Review
from app.schemas.review import ReviewCreate, ReviewUpdate


class CRUDReview(CRUDBase[Review, ReviewCreate, ReviewUpdate]):
    search_fields = ("student_name", "comment")
    default_order = (Review.date.desc(),)

    def get_recent(self, db: Session, *, limit: int = 5) -> List[Review]:
        return self.get_multi(db, limit=limit, order_by=(Review.date.desc(), Review.id.desc()))

    def get_average_rating(self, db: Session) -> float:
        result = db.query(func.avg(Review.rating)).scalar()
        return round(float(result), 1) if result else 0


review = CRUDReview(Review)
