# product_api/schemas.py
from pydantic import BaseModel, ConfigDict, Field


class ProductIn(BaseModel):
    name: str
    # NaN / Infinity get through the JSON decoder; reject them here
    price: float = Field(0.0, allow_inf_nan=False)


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: float


class DeleteResult(BaseModel):
    result: str = "success"


class ErrorOut(BaseModel):
    error: str
