"""
Application Exception Handling

Single AppException class for all catalog and command errors.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    The message is the exact text shown to the user after the
    "Error: " prefix, so factories below own the wording.

    Usage:
        raise AppException("Product A already exists", "PRODUCT_EXISTS")

    Error Codes:
        Catalog:
            - PRODUCT_EXISTS
            - CATEGORY_NOT_FOUND

        Commands:
            - INVALID_COMMAND
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_EXISTS")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_already_exists(name: str) -> AppException:
    """Create duplicate product name exception."""
    return AppException(
        f"Product {name} already exists",
        "PRODUCT_EXISTS",
        {"name": name}
    )


def category_not_found(category: str) -> AppException:
    """Create unknown category exception."""
    return AppException(
        f"Type {category} does not exists",
        "CATEGORY_NOT_FOUND",
        {"category": category}
    )


def invalid_command(line: str, reason: str) -> AppException:
    """Create malformed command exception."""
    return AppException(
        f"Invalid command '{line}': {reason}",
        "INVALID_COMMAND",
        {"line": line, "reason": reason}
    )
