from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from .common import PatchModel
from .user import UserRead

class StoreBase(BaseModel):
    name: str
    user_id: int = Field(..., alias="userId", description="Owner of the store")

    model_config = ConfigDict(populate_by_name=True)

class StoreCreate(StoreBase):
    pass

class StoreUpdate(PatchModel):
    name: Optional[str] = None
    user_id: Optional[int] = Field(None, alias="userId")

class StoreRead(StoreBase):
    id: int

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

class StoreWithOwner(StoreRead):
    user: UserRead
