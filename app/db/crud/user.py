from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.models.user import User
from app.db.schemas.user import UserCreate, UserUpdate
from .base import apply_changes, not_found, translate_errors

def get_user(db: Session, user_id: int) -> Optional[User]:
    with translate_errors(db, "get user"):
        return db.query(User).filter(User.id == user_id).first()

def get_users(db: Session) -> List[User]:
    with translate_errors(db, "list users"):
        return db.query(User).order_by(User.id.asc()).all()

def create_user(db: Session, user: UserCreate) -> User:
    db_user = User(**user.model_dump())
    with translate_errors(db, "create user"):
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
    return db_user

def update_user(db: Session, user_id: int, user_update: UserUpdate) -> User:
    db_user = get_user(db, user_id)
    if not db_user:
        raise not_found("user", user_id)

    with translate_errors(db, "update user"):
        apply_changes(db_user, user_update.changes())
        db.commit()
        db.refresh(db_user)
    return db_user

def delete_user(db: Session, user_id: int) -> None:
    db_user = get_user(db, user_id)
    if not db_user:
        raise not_found("user", user_id)

    with translate_errors(db, "delete user"):
        db.delete(db_user)
        db.commit()
