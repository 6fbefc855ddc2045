from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from app.db.types import ExactDecimal

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # Currency, returned as the exact decimal.Decimal that was stored
    price = Column(ExactDecimal, nullable=False)
    store_id = Column(Integer, ForeignKey("stores.id"), nullable=False, index=True)

    store = relationship("Store", back_populates="products")

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"
