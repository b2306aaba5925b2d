"""Catalog Resources — the three ResourceDefinitions served by the API.

Invariants:
    - Category searches name; Product searches name OR brand;
      Order searches order_number OR customer_name
    - Exactly one definition per ResourceKind
"""

from warehouse_api.core.domain_types import ResourceKind
from warehouse_api.models import Category, Order, Product
from warehouse_api.schemas.catalog import (
    CategoryRead, CategoryWrite,
    OrderRead, OrderWrite,
    ProductRead, ProductWrite,
)
from warehouse_api.services.resource_handler import ResourceDefinition


CATEGORIES = ResourceDefinition(
    kind=ResourceKind.CATEGORIES,
    label="Category",
    model=Category,
    write_schema=CategoryWrite,
    read_schema=CategoryRead,
    search_fields=("name",),
)

PRODUCTS = ResourceDefinition(
    kind=ResourceKind.PRODUCTS,
    label="Product",
    model=Product,
    write_schema=ProductWrite,
    read_schema=ProductRead,
    search_fields=("name", "brand"),
)

ORDERS = ResourceDefinition(
    kind=ResourceKind.ORDERS,
    label="Order",
    model=Order,
    write_schema=OrderWrite,
    read_schema=OrderRead,
    search_fields=("order_number", "customer_name"),
)

CATALOG_RESOURCES: tuple[ResourceDefinition, ...] = (CATEGORIES, PRODUCTS, ORDERS)
