# models/store.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base

class Store(Base):
    __tablename__ = "stores"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)

    user = relationship("User", back_populates="store")
    products = relationship("Product", back_populates="store", order_by="Product.id", passive_deletes="all")

    def __repr__(self):
        return f"<Store(id={self.id}, name='{self.name}', user_id={self.user_id})>"
