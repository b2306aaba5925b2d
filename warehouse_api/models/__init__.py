"""ORM Models — SQLAlchemy declarative models for the catalog entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - One table per entity; integer surrogate keys generated by the store

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from warehouse_api.models.category import Category  # noqa: F401
from warehouse_api.models.product import Product  # noqa: F401
from warehouse_api.models.order import Order  # noqa: F401
