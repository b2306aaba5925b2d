"""Category ORM — product grouping (e.g. soft drinks, juices).

Invariants:
    - id is an autoincrement integer primary key
    - name is non-nullable, at most 100 chars
    - created_date defaults to insertion time, is_active defaults to True
"""

from datetime import datetime, timezone

from sqlalchemy import String, Boolean, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from warehouse_api.db.base import Base


class Category(Base):
    """Category entity — referenced by products."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(250), nullable=True)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    additional_info: Mapped[str | None] = mapped_column(
        String(250), nullable=True,
    )
