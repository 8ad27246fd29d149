"""
==============================================================================
Product Models Module
==============================================================================

Pydantic model for catalog items.

A Product carries two separate contracts:
- identity (==, hash) uses the name only, for duplicate detection;
- display order (<, >, compare_to) uses (price, name, category), for
  keeping index buckets sorted.

==============================================================================
"""

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field


def format_price(price: float) -> str:
    """
    Render a price as the shortest round-trip decimal.

    A trailing ".0" is dropped; exponent forms are kept as repr gives them.

    Example:
        >>> format_price(5.0)
        '5'
        >>> format_price(10.5)
        '10.5'
        >>> format_price(1e16)
        '1e+16'
    """
    text = repr(price)
    if text.endswith(".0"):
        return text[:-2]
    return text


class Product(BaseModel):
    """
    Product model for catalog items.

    Attributes:
        name: Product name, unique within a store
        price: Product price (not validated for sign)
        category: Category the product is filed under
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Product name")
    price: float = Field(..., description="Product price")
    category: str = Field(..., min_length=1, description="Product category")

    # =========================================================================
    # IDENTITY
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    # =========================================================================
    # DISPLAY ORDER
    # =========================================================================

    @property
    def sort_key(self) -> Tuple[float, str, str]:
        """Key for display order: price, then name, then category."""
        return (self.price, self.name, self.category)

    def compare_to(self, other: "Product") -> int:
        """Return a negative, zero or positive number per display order."""
        mine, theirs = self.sort_key, other.sort_key
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.sort_key >= other.sort_key

    # =========================================================================
    # DISPLAY
    # =========================================================================

    @property
    def display_name(self) -> str:
        """Display form used in filter results, e.g. "A(10)"."""
        return f"{self.name}({format_price(self.price)})"

    def __str__(self) -> str:
        return self.display_name
