"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EntityId wraps the integer surrogate key — never a bare int in handler logic
    - PageWindow offset >= 0 and limit >= 1
    - Keys and integer columns fit a 32-bit signed store integer (STORE_INT_MAX)
    - Resource kinds encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: the value doubles as the URL segment and the OpenAPI tag
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", int)

STORE_INT_MAX = 2**31 - 1
STORE_INT_MIN = -(2**31)


def is_storable_id(value: int) -> bool:
    """True when value can be a generated key (1 .. STORE_INT_MAX)."""
    return 1 <= value <= STORE_INT_MAX


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class PageWindow:
    """Offset/limit slice of an ordered result set."""
    offset: int
    limit: int


# ─── Enums ───────────────────────────────────────────────────────

class ResourceKind(str, Enum):
    """The three catalog resources — value is the collection path segment."""
    CATEGORIES = "categories"
    PRODUCTS = "products"
    ORDERS = "orders"
