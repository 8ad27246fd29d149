"""
==============================================================================
Product Store Module
==============================================================================

In-memory product catalog with three synchronized indexes.

Indexes:
--------
- by name:     dict name -> Product (identity, duplicate rejection)
- by category: dict category -> list of Products in display order
- by price:    PriceIndex, ordered price -> list of Products

Every successful add updates all three before returning, and products are
never removed, so each stored product sits in exactly one category bucket
and exactly one price bucket.

Filters return at most ``MAX_RESULTS`` (10) products in display order
(price, name, category).

==============================================================================
"""

from __future__ import annotations

import logging
from bisect import insort
from itertools import chain, islice
from typing import Dict, Iterable, List, Optional

from market.core import exceptions

from .models import Product
from .price_index import PriceBucket, PriceIndex


# Module logger
logger = logging.getLogger(__name__)


class ProductStore:
    """
    Multi-index product store.

    Attributes:
        MAX_RESULTS: Cap on the number of products any filter returns

    Example:
        >>> store = ProductStore()
        >>> a = store.add("A", 10, "food")
        >>> b = store.add("B", 5, "food")
        >>> [p.display_name for p in store.filter_by_category("food")]
        ['B(5)', 'A(10)']
    """

    MAX_RESULTS = 10

    def __init__(self, max_results: int = MAX_RESULTS) -> None:
        """
        Initialize an empty store.

        Args:
            max_results: Filter cap, MAX_RESULTS unless overridden in code
        """
        if max_results < 1:
            raise ValueError("max_results must be at least 1")

        self._max_results = max_results
        self._by_name: Dict[str, Product] = {}
        self._by_category: Dict[str, List[Product]] = {}
        self._by_price = PriceIndex()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def max_results(self) -> int:
        return self._max_results

    @property
    def products(self) -> List[Product]:
        """All products in display order."""
        return sorted(self._by_name.values())

    @property
    def categories(self) -> List[str]:
        """Known category names, sorted."""
        return sorted(self._by_category)

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add(self, name: str, price: float, category: str) -> Product:
        """
        Add a new product to every index.

        Args:
            name: Unique product name
            price: Product price
            category: Product category

        Returns:
            The stored Product

        Raises:
            AppException: PRODUCT_EXISTS if the name is already stored
        """
        product = Product(name=name, price=price, category=category)

        if product.name in self._by_name:
            logger.info(f"Rejected duplicate product: {name}")
            raise exceptions.product_already_exists(name)

        self._by_name[product.name] = product
        insort(self._by_category.setdefault(product.category, []), product)
        self._by_price.add(product)

        logger.info(f"Added product {product.display_name} to {product.category}")
        return product

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def get(self, name: str) -> Optional[Product]:
        """Find a product by exact name."""
        return self._by_name.get(name)

    def filter_by_category(self, category: str) -> List[Product]:
        """
        Get the first products of a category in display order.

        Raises:
            AppException: CATEGORY_NOT_FOUND if no product was ever filed
                under the category
        """
        bucket = self._by_category.get(category)
        if bucket is None:
            raise exceptions.category_not_found(category)

        results = bucket[:self._max_results]
        logger.debug(f"Category {category}: {len(results)} of {len(bucket)} products")
        return results

    def filter_by_price_range(self, min_price: float, max_price: float) -> List[Product]:
        """Get products with min_price <= price <= max_price."""
        return self._collect(self._by_price.range(min_price, max_price))

    def filter_from(self, min_price: float) -> List[Product]:
        """Get products with price >= min_price."""
        return self._collect(self._by_price.range_from(min_price))

    def filter_to(self, max_price: float) -> List[Product]:
        """Get products with price <= max_price."""
        return self._collect(self._by_price.range_to(max_price))

    def _collect(self, buckets: Iterable[PriceBucket]) -> List[Product]:
        """Flatten buckets in order, stopping once the cap is reached."""
        products = chain.from_iterable(bucket for _, bucket in buckets)
        results = list(islice(products, self._max_results))
        logger.debug(f"Price filter matched {len(results)} products")
        return results

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_stats(self) -> Dict:
        """Get store statistics."""
        return {
            "total_products": len(self._by_name),
            "categories": {
                category: len(bucket)
                for category, bucket in sorted(self._by_category.items())
            },
            "distinct_prices": len(self._by_price),
        }

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name
