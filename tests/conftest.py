"""Root conftest — shared test configuration.

Runs before any warehouse_api import so cached settings see these values.
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
# Fixed identity store for every test; overrides any developer .env
os.environ["BASIC_AUTH_USERS"] = '{"warehouse": "s3cret", "auditor": "p:ss:word"}'
os.environ["BASIC_AUTH_REALM"] = "BeverageWarehouse"
