"""
Shared helpers for route handlers.
"""
from typing import Type, TypeVar
from sqlalchemy.orm import Session
from app.db.base import BaseModel
from app.services.exceptions import NotFoundError, ConflictError

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_or_404(db: Session, model: Type[ModelT], record_id: int, label: str = None) -> ModelT:
    """Fetch a record by id or raise NotFoundError (rendered as 404)."""
    record = db.query(model).filter(model.id == record_id).first()
    if not record:
        raise NotFoundError(label or model.__name__, record_id)
    return record


def ensure_exists(db: Session, model: Type[BaseModel], record_id, label: str = None):
    """Validate an optional foreign key named in a request body."""
    if record_id is None:
        return
    if not db.query(model.id).filter(model.id == record_id).first():
        raise NotFoundError(label or model.__name__, record_id)


def apply_update(record, changes: dict):
    """Copy the fields a partial update actually supplied."""
    for field, value in changes.items():
        setattr(record, field, value)
    return record


def changes_from(data, required=()) -> dict:
    """Fields supplied in a partial update; nulls are dropped for required columns."""
    changes = data.model_dump(exclude_unset=True)
    return {k: v for k, v in changes.items() if v is not None or k not in required}


def ensure_unreferenced(db: Session, entity: str, record_id: int, references):
    """Raise ConflictError while any ``(column, label)`` reference still points at the record."""
    for column, label in references:
        if db.query(column).filter(column == record_id).first():
            raise ConflictError(f"{entity} {record_id} still has {label}")
