from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.db.crud import user as user_crud
from app.db.errors import DataStoreError, ErrorKind
from app.db.schemas.user import UserCreate, UserUpdate, UserRead

router = APIRouter(
    prefix="/usuarios",
    tags=["users"]
)

@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    user: UserCreate,
    db: Session = Depends(get_db)
):
    """Create a new user"""
    try:
        return user_crud.create_user(db, user)
    except DataStoreError as e:
        if e.kind is ErrorKind.CONSTRAINT_VIOLATION:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="email already registered"
            )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="failed to create user"
        )

@router.get("", response_model=List[UserRead])
def get_users(db: Session = Depends(get_db)):
    """List users ordered by id"""
    try:
        return user_crud.get_users(db)
    except DataStoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="failed to list users"
        )

@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    db: Session = Depends(get_db)
):
    """Get a specific user"""
    try:
        db_user = user_crud.get_user(db, user_id)
    except DataStoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    if not db_user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="user not found"
        )
    return db_user

@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    user: UserUpdate,
    db: Session = Depends(get_db)
):
    """Update a user; empty fields are left as they are"""
    try:
        return user_crud.update_user(db, user_id, user)
    except DataStoreError as e:
        if e.kind is ErrorKind.NOT_FOUND:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="user not found")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db)
):
    """Delete a user"""
    try:
        user_crud.delete_user(db, user_id)
    except DataStoreError as e:
        if e.kind is ErrorKind.NOT_FOUND:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="user not found")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
