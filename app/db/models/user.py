from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    password = Column(String, nullable=False)

    # One-to-one: the unique constraint lives on stores.user_id
    store = relationship("Store", back_populates="user", uselist=False, passive_deletes="all")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
