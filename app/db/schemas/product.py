from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal
from typing import Any, Dict, Optional
from .common import PatchModel

class ProductBase(BaseModel):
    name: str
    price: Decimal = Field(..., description="Exact decimal price, accepted as a string or a number")
    store_id: int = Field(..., alias="storeId")

    model_config = ConfigDict(populate_by_name=True)

class ProductCreate(ProductBase):
    pass

class ProductUpdate(PatchModel):
    name: Optional[str] = None
    price: Optional[Decimal] = None
    store_id: Optional[int] = Field(None, alias="storeId")

    def changes(self) -> Dict[str, Any]:
        # Price is written whenever it is sent, so 0 is a valid new price
        data = super().changes()
        data.pop("price", None)
        if "price" in self.model_fields_set:
            data["price"] = self.price
        return data

class ProductRead(ProductBase):
    id: int

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
