"""Order ORM — a customer order header. No relationships.

Invariants:
    - order_number at most 50 chars, customer_name at most 100, status at most 50
    - order_date defaults to insertion time
    - total_amount is stored as given (never derived)
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Integer, Numeric, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.db.base import Base


class Order(Base):
    """Order entity."""
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    order_number: Mapped[str] = mapped_column(String(50), nullable=False)
    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    total_amount: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), nullable=False,
    )
    customer_name: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
