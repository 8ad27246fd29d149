"""
==============================================================================
Price Index Module
==============================================================================

Ordered mapping from exact price to the bucket of products at that price.

Keys are held in a sorted list searched with bisect; buckets live in a
dict and are themselves kept sorted in display order. Range lookups cost
O(log n) to find the bounds and iterate lazily, so callers that only need
the first few products stop without touching the rest of the index.

Range Modes:
-----------
- range(min, max): min <= price <= max
- range_from(min): price >= min
- range_to(max):   price <= max

==============================================================================
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from typing import Dict, Iterator, List, Tuple

from .models import Product


PriceBucket = Tuple[float, List[Product]]


class PriceIndex:
    """
    Sorted-array ordered map of price -> products.

    Example:
        >>> index = PriceIndex()
        >>> index.add(Product(name="A", price=10, category="food"))
        >>> [price for price, _ in index.range_from(5)]
        [10.0]
    """

    def __init__(self) -> None:
        self._keys: List[float] = []
        self._buckets: Dict[float, List[Product]] = {}

    def add(self, product: Product) -> None:
        """Insert a product into the bucket for its price, creating it."""
        bucket = self._buckets.get(product.price)
        if bucket is None:
            bucket = []
            self._buckets[product.price] = bucket
            insort(self._keys, product.price)
        insort(bucket, product)

    def range(self, min_price: float, max_price: float) -> Iterator[PriceBucket]:
        """Iterate buckets with min_price <= price <= max_price."""
        if min_price > max_price:
            return iter(())
        lower = bisect_left(self._keys, min_price)
        upper = bisect_right(self._keys, max_price)
        return self._iter_slice(lower, upper)

    def range_from(self, min_price: float) -> Iterator[PriceBucket]:
        """Iterate buckets with price >= min_price."""
        return self._iter_slice(bisect_left(self._keys, min_price), len(self._keys))

    def range_to(self, max_price: float) -> Iterator[PriceBucket]:
        """Iterate buckets with price <= max_price."""
        return self._iter_slice(0, bisect_right(self._keys, max_price))

    def keys(self) -> List[float]:
        """Distinct prices in ascending order."""
        return self._keys.copy()

    def _iter_slice(self, lower: int, upper: int) -> Iterator[PriceBucket]:
        for position in range(lower, upper):
            price = self._keys[position]
            yield price, self._buckets[price]

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, price: object) -> bool:
        return price in self._buckets
