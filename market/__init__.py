"""
==============================================================================
Online Market
==============================================================================

In-memory product catalog with category and price range filters.

Packages:
---------
- config: Pydantic Settings
- core: AppException and error factories
- catalog: Product, PriceIndex, ProductStore
- commands: CommandParser, CommandDispatcher, OutputFormatter

==============================================================================
"""

__version__ = "1.0.0"
