# Eagerly expanded read shapes that nest one entity inside another
from typing import List
from .product import ProductRead
from .store import StoreWithOwner

class StoreDetail(StoreWithOwner):
    products: List[ProductRead] = []

class ProductDetail(ProductRead):
    store: StoreWithOwner
