"""
==============================================================================
Core Package
==============================================================================

Core utilities shared by the catalog and the command console.

Modules:
--------
- exceptions: AppException class and error factory functions

Usage:
------
    from market.core import AppException

    # Or use exception factory functions via module
    from market.core import exceptions
    raise exceptions.category_not_found("drinks")

==============================================================================
"""

from . import exceptions
from .exceptions import AppException

__all__ = [
    "AppException",
    "exceptions",
]
