
from pydantic import BaseModel, ConfigDict, model_validator
from typing import Any, Tuple

def _drop_nulls(data: Any) -> Any:
    # a JSON null leaves the field at its empty default; a null object is an empty one
    if data is None:
        return {}
    if isinstance(data, dict):
        return {k: v for k, v in data.items() if v is not None}
    return data

# Wire names follow the public receipt JSON (camelCase).
class Item(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    shortDescription: str = ""
    price: str = ""

    @model_validator(mode="before")
    @classmethod
    def nulls_to_defaults(cls, data: Any) -> Any:
        return _drop_nulls(data)

class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    retailer: str = ""
    purchaseDate: str = ""
    purchaseTime: str = ""
    items: Tuple[Item, ...] = ()
    total: str = ""

    @model_validator(mode="before")
    @classmethod
    def nulls_to_defaults(cls, data: Any) -> Any:
        return _drop_nulls(data)

class ReceiptIdResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int
