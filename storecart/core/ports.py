"""Port interfaces for the storecart pricing core.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package (driven ports) or in the core itself (driving ports).

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - ProductSourcePort: Fetch raw product records from the catalog API
   - RandomSourcePort: Uniform draws for the stock simulation

2. **Driving Ports** (adapters/external systems call into core)
   - CatalogPort: Priced product lookup and availability
   - CartPort: Cart mutation, totals and validation
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .models import CartLine, CartSummary, CartValidation, Product


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class ProductSourcePort(ABC):
    """Port for retrieving raw product records from a remote catalog.

    Adapters implementing this port fetch JSON-shaped records with the
    fields ``id, title, price, description, category, image``. Enrichment
    (tax tier, taxed price) is done by the core, never by the adapter.

    Implementations must handle:
    - Non-success responses (raise, do not return partial data)
    - Transport timeouts
    - Releasing connections on close()
    """

    @abstractmethod
    async def fetch_product(self, product_id: Any) -> Mapping[str, Any]:
        """Fetch one product record.

        Args:
            product_id: Opaque product identifier.

        Returns:
            The raw product record.

        Raises:
            Exception: If the catalog is unreachable, answers with a
                non-success status, or has no such product.
        """

    @abstractmethod
    async def fetch_category(self, category: str) -> list[Mapping[str, Any]]:
        """Fetch all product records in a category.

        Args:
            category: Category name as known by the catalog.

        Returns:
            Raw product records in upstream order. Empty list if the
            category has no products.

        Raises:
            Exception: If the catalog is unreachable or answers with a
                non-success status.
        """

    @abstractmethod
    async def close(self) -> None:
        """Release any underlying connections."""


class RandomSourcePort(ABC):
    """Port for the randomness behind the stock simulation.

    Injected so that availability checks can be made deterministic.
    """

    @abstractmethod
    def draw(self) -> float:
        """Return a uniform float in [0.0, 1.0)."""


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class CatalogPort(ABC):
    """Port for priced product lookup.

    Implementations live in the core (catalog_service.py). The cart
    service and the CLI call these methods.
    """

    @abstractmethod
    async def get_product(self, product_id: Any) -> Product:
        """Look up a single product and price it.

        Args:
            product_id: Opaque product identifier.

        Returns:
            Product with tax tier and taxed price.

        Raises:
            CatalogLookupError: If the product could not be fetched.
        """

    @abstractmethod
    async def get_products_by_category(self, category: str) -> list[Product]:
        """Look up and price every product in a category.

        Args:
            category: Category name.

        Returns:
            Products in upstream order.

        Raises:
            CatalogLookupError: If the category could not be fetched.
                The whole call fails; there are no partial results.
        """

    @abstractmethod
    async def is_available(self, product_id: Any) -> bool:
        """Estimate whether a product is in stock.

        Never raises for lookup failures; a product that cannot be
        fetched is reported as unavailable.

        Args:
            product_id: Opaque product identifier.

        Returns:
            True if the product can be sold.
        """


class CartPort(ABC):
    """Port for operating on a single shopping cart.

    Implementations live in the core (cart_service.py). The CLI calls
    these methods on behalf of the shopper.
    """

    @abstractmethod
    async def add_product(self, product_id: Any, quantity: int = 1) -> CartLine:
        """Add units of a product to the cart.

        Args:
            product_id: Opaque product identifier.
            quantity: Units to add, at least 1.

        Returns:
            The new or updated line.

        Raises:
            ValueError: If quantity is not a positive integer.
            CatalogLookupError: If the product could not be fetched.
            NotAvailableError: If the product is out of stock.
        """

    @abstractmethod
    def get_summary(self) -> CartSummary:
        """Compute totals for the current cart contents. No I/O."""

    @abstractmethod
    async def validate_cart(self) -> CartValidation:
        """Re-check availability of every line in the cart."""

    @abstractmethod
    def clear_cart(self) -> None:
        """Remove every line from the cart."""

    @abstractmethod
    def get_items(self) -> list[CartLine]:
        """Return copies of the cart lines."""
