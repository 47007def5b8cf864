"""Domain errors raised by the catalog and cart services.

Two disjoint kinds: a product that cannot be priced (the lookup failed)
and a product that was priced but cannot be added (not in stock).
"""

from typing import Any


class StoreCartError(Exception):
    """Base class for all storecart domain errors.

    These errors should be surfaced to callers as request failures,
    not as internal crashes.
    """

    code: str = "storecart_error"
    message: str

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message


class CatalogLookupError(StoreCartError, LookupError):
    """The product source failed or answered with a non-success status.

    Also a builtin ``LookupError``, so generic lookup handlers catch it.

    Always raised ``from`` the underlying exception; the cause's message
    is embedded in ``message``.
    """

    code = "catalog_lookup"

    def __init__(
        self,
        message: str,
        product_id: Any = None,
        category: str | None = None,
    ) -> None:
        super().__init__(message)
        self.product_id = product_id
        self.category = category


class NotAvailableError(StoreCartError):
    """A priced product cannot be added because it is out of stock."""

    code = "not_available"

    def __init__(self, product_id: Any, title: str) -> None:
        super().__init__(f"Product {title} is not available in stock")
        self.product_id = product_id
        self.title = title
