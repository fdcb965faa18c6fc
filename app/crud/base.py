from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar, Union
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel
from sqlalchemy import or_
from sqlalchemy.orm import Query, Session
from app.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    # Columns matched by the case-insensitive ``search`` term of get_page.
    search_fields: Sequence[str] = ()
    # Default ordering of get_page; ties are broken by id desc.
    default_order: Sequence[Any] = ()

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def exists(self, db: Session, id: Any) -> bool:
        return db.query(self.model.id).filter(self.model.id == id).first() is not None

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: int = 100, order_by: Sequence[Any] = ()
    ) -> List[ModelType]:
        query = db.query(self.model)
        if order_by:
            query = query.order_by(*order_by)
        return query.offset(skip).limit(limit).all()

    def _filtered_query(
        self, db: Session, *, filters: Optional[Dict[str, Any]] = None, search: Optional[str] = None
    ) -> Query:
        query = db.query(self.model)
        for field, value in (filters or {}).items():
            if value is None:
                continue
            query = query.filter(getattr(self.model, field) == value)
        if search and self.search_fields:
            pattern = f"%{search}%"
            query = query.filter(
                or_(*[getattr(self.model, field).ilike(pattern) for field in self.search_fields])
            )
        return query

    def get_page(
        self,
        db: Session,
        *,
        page: int = 1,
        limit: int = 20,
        filters: Optional[Dict[str, Any]] = None,
        search: Optional[str] = None,
        order_by: Sequence[Any] = (),
    ) -> Tuple[List[ModelType], int]:
        """Return one 1-indexed page and the total count of the same filtered query."""
        query = self._filtered_query(db, filters=filters, search=search)
        total = query.order_by(None).count()
        ordering = list(order_by or self.default_order) + [self.model.id.desc()]
        items = query.order_by(*ordering).offset((page - 1) * limit).limit(limit).all()
        return items, total

    def count(self, db: Session, *, filters: Optional[Dict[str, Any]] = None) -> int:
        return self._filtered_query(db, filters=filters).count()

    def create(self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]], commit: bool = True) -> ModelType:
        obj_in_data = obj_in if isinstance(obj_in, dict) else jsonable_encoder(obj_in, exclude_none=True)
        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        db.flush() # Populate ID
        if commit:
            db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self, db: Session, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def increment(self, db: Session, *, id: Any, field: str, amount: int = 1) -> bool:
        """Atomically bump a counter column in the database; False when no row matched."""
        column = getattr(self.model, field)
        updated = (
            db.query(self.model)
            .filter(self.model.id == id)
            .update({column: column + amount}, synchronize_session=False)
        )
        db.commit()
        return updated > 0

    def delete(self, db: Session, *, id: Any) -> Optional[ModelType]:
        obj = db.get(self.model, id)
        if not obj:
            return None
        db.delete(obj)
        db.commit()
        return obj
