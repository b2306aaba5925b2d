"""Catalog Routers — one APIRouter per catalog resource, registered in main.py."""

from warehouse_api.api.routes.resource_routes import build_resource_router
from warehouse_api.services.catalog_resources import CATEGORIES, ORDERS, PRODUCTS

categories_router = build_resource_router(CATEGORIES)
products_router = build_resource_router(PRODUCTS)
orders_router = build_resource_router(ORDERS)
