from sqlalchemy.orm import Session, joinedload, selectinload
from typing import Optional
from app.db.models.store import Store
from app.db.schemas.store import StoreCreate, StoreUpdate
from .base import apply_changes, not_found, translate_errors

def get_store(db: Session, store_id: int) -> Optional[Store]:
    with translate_errors(db, "get store"):
        return db.query(Store).filter(Store.id == store_id).first()

def get_store_detail(db: Session, store_id: int) -> Optional[Store]:
    """Load a store together with its owner and its products."""
    with translate_errors(db, "get store"):
        return (
            db.query(Store)
            .options(joinedload(Store.user), selectinload(Store.products))
            .filter(Store.id == store_id)
            .first()
        )

def get_store_by_user(db: Session, user_id: int) -> Optional[Store]:
    with translate_errors(db, "look up store by owner"):
        return db.query(Store).filter(Store.user_id == user_id).first()

def create_store(db: Session, store: StoreCreate) -> Store:
    db_store = Store(**store.model_dump())
    with translate_errors(db, "create store"):
        db.add(db_store)
        db.commit()
        db.refresh(db_store)
    return db_store

def update_store(db: Session, store_id: int, store_update: StoreUpdate) -> Store:
    db_store = get_store(db, store_id)
    if not db_store:
        raise not_found("store", store_id)

    with translate_errors(db, "update store"):
        apply_changes(db_store, store_update.changes())
        db.commit()
        db.refresh(db_store)
    return db_store

def delete_store(db: Session, store_id: int) -> None:
    db_store = get_store(db, store_id)
    if not db_store:
        raise not_found("store", store_id)

    with translate_errors(db, "delete store"):
        db.delete(db_store)
        db.commit()
