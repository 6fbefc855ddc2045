from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.db.crud import store as store_crud
from app.db.errors import DataStoreError
from app.db.schemas.detail import StoreDetail
from app.db.schemas.store import StoreCreate, StoreUpdate, StoreRead

router = APIRouter(
    prefix="/stores",
    tags=["stores"]
)

@router.post("", response_model=StoreRead, status_code=status.HTTP_201_CREATED)
def create_store(
    store: StoreCreate,
    db: Session = Depends(get_db)
):
    """Create the store of a user (one store per user)"""
    try:
        # Early answer only; stores.user_id is unique in the database
        if store_crud.get_store_by_user(db, store.user_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="user already has a store"
            )
        return store_crud.create_store(db, store)
    except DataStoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

@router.get("/{store_id}", response_model=StoreDetail)
def get_store(
    store_id: int,
    db: Session = Depends(get_db)
):
    """Get a store with its owner and products"""
    try:
        db_store = store_crud.get_store_detail(db, store_id)
    except DataStoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    if not db_store:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="store not found"
        )
    return db_store

@router.put("/{store_id}", response_model=StoreRead)
def update_store(
    store_id: int,
    store: StoreUpdate,
    db: Session = Depends(get_db)
):
    """Update a store"""
    try:
        return store_crud.update_store(db, store_id, store)
    except DataStoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

@router.delete("/{store_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_store(
    store_id: int,
    db: Session = Depends(get_db)
):
    """Delete a store"""
    try:
        store_crud.delete_store(db, store_id)
    except DataStoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
