"""Core domain logic for the storecart pricing system.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .errors import CatalogLookupError, NotAvailableError, StoreCartError
from .models import (
    CartLine,
    CartSummary,
    CartValidation,
    Product,
    ValidationEntry,
)

__all__ = [
    "CartLine",
    "CartSummary",
    "CartValidation",
    "CatalogLookupError",
    "NotAvailableError",
    "Product",
    "StoreCartError",
    "ValidationEntry",
]
