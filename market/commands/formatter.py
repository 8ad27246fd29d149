"""
==============================================================================
Output Formatter Module
==============================================================================

Renders store results and errors as single output lines.

Line Formats:
------------
    Ok: Product <name> added successfully
    Ok: <name>(<price>), <name>(<price>), ...
    Error: <message>

==============================================================================
"""

from __future__ import annotations

from typing import Iterable

from market.catalog import Product
from market.core import AppException


class OutputFormatter:
    """Formatter for console output lines."""

    PRINT_TEMPLATE = "Ok: {payload}"
    PRODUCT_ADDED = "Ok: Product {name} added successfully"
    ERROR_TEMPLATE = "Error: {message}"
    SEPARATOR = ", "

    def added(self, product: Product) -> str:
        return self.PRODUCT_ADDED.format(name=product.name)

    def products(self, products: Iterable[Product]) -> str:
        payload = self.SEPARATOR.join(product.display_name for product in products)
        return self.PRINT_TEMPLATE.format(payload=payload)

    def error(self, exc: AppException) -> str:
        return self.ERROR_TEMPLATE.format(message=exc.message)
