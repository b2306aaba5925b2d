"""Product ORM — a stocked beverage belonging to exactly one category.

Invariants:
    - Always belongs to a Category (category_id FK, enforced by the store)
    - volume and price are decimal(10,2)
    - category relationship is read-only from the product side

Design Decisions:
    - lazy="selectin": every product load carries its category, so list and
      detail reads never trigger implicit IO in async context
    - ON DELETE CASCADE: deleting a category removes its products at the store level
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import String, Integer, Numeric, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from warehouse_api.db.base import Base


class Product(Base):
    """Product entity — stock line in the warehouse."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    brand: Mapped[str] = mapped_column(String(100), nullable=False)
    volume: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    production_date: Mapped[date] = mapped_column(Date, nullable=False)
    expiration_date: Mapped[date] = mapped_column(Date, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    category: Mapped["Category"] = relationship(
        "Category", lazy="selectin", viewonly=True,
    )
