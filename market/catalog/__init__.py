"""
==============================================================================
Catalog Package - Product Management
==============================================================================

In-memory product catalog with category and price indexes.

Classes:
--------
- Product: Pydantic model for products
- PriceIndex: Ordered price -> products map with range scans
- ProductStore: Multi-index store with capped filters

==============================================================================
"""

from .models import Product, format_price
from .price_index import PriceIndex
from .store import ProductStore

__all__ = [
    "Product",
    "format_price",
    "PriceIndex",
    "ProductStore",
]
