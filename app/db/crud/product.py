from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from app.db.models.product import Product
from app.db.models.store import Store
from app.db.schemas.product import ProductCreate, ProductUpdate
from .base import apply_changes, not_found, translate_errors

def _with_store_and_owner(query):
    return query.options(joinedload(Product.store).joinedload(Store.user))

def get_product(db: Session, product_id: int) -> Optional[Product]:
    with translate_errors(db, "get product"):
        return db.query(Product).filter(Product.id == product_id).first()

def get_product_detail(db: Session, product_id: int) -> Optional[Product]:
    with translate_errors(db, "get product"):
        return _with_store_and_owner(db.query(Product)).filter(Product.id == product_id).first()

def get_products(db: Session) -> List[Product]:
    with translate_errors(db, "list products"):
        return _with_store_and_owner(db.query(Product)).order_by(Product.id.asc()).all()

def create_product(db: Session, product: ProductCreate) -> Product:
    db_product = Product(**product.model_dump())
    with translate_errors(db, "create product"):
        db.add(db_product)
        db.commit()
        db.refresh(db_product)
    return db_product

def update_product(db: Session, product_id: int, product_update: ProductUpdate) -> Product:
    db_product = get_product(db, product_id)
    if not db_product:
        raise not_found("product", product_id)

    with translate_errors(db, "update product"):
        apply_changes(db_product, product_update.changes())
        db.commit()
        db.refresh(db_product)
    return db_product

def delete_product(db: Session, product_id: int) -> None:
    db_product = get_product(db, product_id)
    if not db_product:
        raise not_found("product", product_id)

    with translate_errors(db, "delete product"):
        db.delete(db_product)
        db.commit()
