# inventory_api/models.py
"""Wire schema shared by the API server and the catalog SDK.

Both tiers import these classes, so the JSON contract lives in one place.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

T = TypeVar("T")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class WireModel(BaseModel):
    """Base model whose input keys are matched to field names ignoring case."""

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        names = {name.lower(): name for name in cls.model_fields}
        return {names.get(str(key).lower(), key): value for key, value in values.items()}


class Category(WireModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str = ""


class Product(WireModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    # 15 significant digits always survive the float written to JSON
    price: Decimal = Field(..., ge=0, max_digits=15, decimal_places=2)
    stock: int = Field(..., ge=0)
    category: Category

    @field_validator("price", mode="before")
    @classmethod
    def _exact_price(cls, value: Any) -> Any:
        # floats go through repr so 25.99 stays 25.99
        if isinstance(value, float):
            return Decimal(repr(value))
        return value

    @field_serializer("price", when_used="json")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)


class ApiResponse(WireModel, Generic[T]):
    success: bool = False
    message: str = ""
    data: Optional[T] = None
    timestamp: datetime = Field(default_factory=utc_now)


ProductListResponse = ApiResponse[List[Product]]
