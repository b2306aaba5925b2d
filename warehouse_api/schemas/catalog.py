"""Catalog Schemas — Pydantic models with field-level constraints for the three resources.

Invariants:
    - Write schemas mirror the column constraints: required text non-blank,
      max lengths, decimal(10,2) amounts, 32-bit integers
    - Write schemas accept an optional id: ignored on create, compared on update
    - createdDate / orderDate / isActive fall back to the same defaults as the models
    - Decimal amounts serialize to JSON numbers

Design Decisions:
    - One module for all three resources: the shapes are small and share helpers
    - camelCase aliases generated, snake_case names still accepted on input
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from warehouse_api.core.domain_types import STORE_INT_MAX, STORE_INT_MIN


StoreInt = Annotated[int, Field(ge=STORE_INT_MIN, le=STORE_INT_MAX)]
Money = Annotated[
    Decimal,
    Field(max_digits=10, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]
StoredMoney = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json"),
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty or whitespace")
    return value


class CatalogSchema(BaseModel):
    """Shared config: camelCase JSON, ORM attribute reads."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- Category -----------------------------------------------------------------

class CategoryWrite(CatalogSchema):
    """Category create/update body."""
    id: int | None = None
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(None, max_length=250)
    created_date: datetime = Field(default_factory=_utcnow)
    is_active: bool = True
    additional_info: str | None = Field(None, max_length=250)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return _reject_blank(v)


class CategoryRead(CatalogSchema):
    id: int
    name: str
    description: str | None = None
    created_date: datetime
    is_active: bool
    additional_info: str | None = None


# --- Product ------------------------------------------------------------------

class ProductWrite(CatalogSchema):
    """Product create/update body. The nested category is never written."""
    id: int | None = None
    name: str = Field(min_length=1, max_length=100)
    category_id: StoreInt
    brand: str = Field(min_length=1, max_length=100)
    volume: Money
    price: Money
    production_date: date
    expiration_date: date
    quantity: StoreInt

    @field_validator("name", "brand")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        return _reject_blank(v)


class ProductRead(CatalogSchema):
    id: int
    name: str
    category_id: int
    category: CategoryRead | None = None
    brand: str
    volume: StoredMoney
    price: StoredMoney
    production_date: date
    expiration_date: date
    quantity: int


# --- Order --------------------------------------------------------------------

class OrderWrite(CatalogSchema):
    """Order create/update body. total_amount is taken as given."""
    id: int | None = None
    order_number: str = Field(min_length=1, max_length=50)
    order_date: datetime = Field(default_factory=_utcnow)
    total_amount: Money
    customer_name: str = Field(min_length=1, max_length=100)
    status: str = Field(min_length=1, max_length=50)

    @field_validator("order_number", "customer_name", "status")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        return _reject_blank(v)


class OrderRead(CatalogSchema):
    id: int
    order_number: str
    order_date: datetime
    total_amount: StoredMoney
    customer_name: str
    status: str
