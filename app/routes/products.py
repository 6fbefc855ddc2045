from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.db.crud import product as product_crud
from app.db.errors import DataStoreError
from app.db.schemas.detail import ProductDetail
from app.db.schemas.product import ProductCreate, ProductUpdate, ProductRead

router = APIRouter(
    prefix="/products",
    tags=["products"]
)

@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    product: ProductCreate,
    db: Session = Depends(get_db)
):
    """Create a product in a store"""
    try:
        return product_crud.create_product(db, product)
    except DataStoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

@router.get("", response_model=List[ProductDetail])
def get_products(db: Session = Depends(get_db)):
    """List products with their store and the store's owner"""
    try:
        return product_crud.get_products(db)
    except DataStoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

@router.get("/{product_id}", response_model=ProductDetail)
def get_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    """Get a product with its store and the store's owner"""
    try:
        db_product = product_crud.get_product_detail(db, product_id)
    except DataStoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    if not db_product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="product not found"
        )
    return db_product

@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: int,
    product: ProductUpdate,
    db: Session = Depends(get_db)
):
    """Update a product"""
    try:
        return product_crud.update_product(db, product_id, product)
    except DataStoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    """Delete a product"""
    try:
        product_crud.delete_product(db, product_id)
    except DataStoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
