"""Fake CatalogPort implementation for testing."""

from typing import Any

from storecart.core.errors import CatalogLookupError
from storecart.core.models import Product
from storecart.core.ports import CatalogPort


class FakeCatalog(CatalogPort):
    """In-memory catalog for testing the cart in isolation.

    Products are returned as given; availability is configured per product
    (default available). Tracks all calls for test assertions.
    """

    def __init__(self) -> None:
        """Initialize with empty catalog."""
        self.products: dict[Any, Product] = {}
        self.availability: dict[Any, bool] = {}
        self.availability_sequences: dict[Any, list[bool]] = {}
        self.get_product_calls: list[Any] = []
        self.is_available_calls: list[Any] = []
        self.category_calls: list[str] = []

    def add_product(self, product: Product, available: bool = True) -> None:
        """Add a product with a fixed availability."""
        self.products[product.id] = product
        self.availability[product.id] = available

    def set_available(self, product_id: Any, available: bool) -> None:
        """Change the availability reported for a product."""
        self.availability[product_id] = available

    def set_availability_sequence(self, product_id: Any, verdicts: list[bool]) -> None:
        """Report these verdicts on successive is_available calls.

        Falls back to the fixed availability once exhausted.
        """
        self.availability_sequences[product_id] = list(verdicts)

    async def get_product(self, product_id: Any) -> Product:
        self.get_product_calls.append(product_id)
        if product_id not in self.products:
            raise CatalogLookupError(
                f"Could not fetch product {product_id}: not found",
                product_id=product_id,
            )
        return self.products[product_id]

    async def get_products_by_category(self, category: str) -> list[Product]:
        self.category_calls.append(category)
        return [p for p in self.products.values() if p.category == category]

    async def is_available(self, product_id: Any) -> bool:
        self.is_available_calls.append(product_id)
        if product_id not in self.products:
            return False
        sequence = self.availability_sequences.get(product_id)
        if sequence:
            return sequence.pop(0)
        return self.availability.get(product_id, True)

    def reset(self) -> None:
        """Reset all products and call history."""
        self.products.clear()
        self.availability.clear()
        self.availability_sequences.clear()
        self.get_product_calls.clear()
        self.is_available_calls.clear()
        self.category_calls.clear()
