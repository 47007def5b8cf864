"""Cart aggregation for the storecart pricing core.

This module keeps an in-memory cart, adds products to it by delegating
to the catalog, and computes totals, discounts and availability across
all lines.
"""

import asyncio
import logging
from decimal import Decimal
from typing import Any

from .errors import NotAvailableError
from .models import CartLine, CartSummary, CartValidation, ValidationEntry
from .ports import CartPort, CatalogPort
from .pricing import calculate_discount, round_money

logger = logging.getLogger(__name__)


class CartService(CartPort):
    """Implements the cart operations for a single shopper.

    The cart is owned exclusively by this instance. add_product runs under
    a per-cart lock so that concurrent adds of the same product accumulate.
    """

    def __init__(self, catalog: CatalogPort):
        self.catalog = catalog
        self._items: list[CartLine] = []
        self._lock = asyncio.Lock()

    async def add_product(self, product_id: Any, quantity: int = 1) -> CartLine:
        """Add units of a product, merging into an existing line.

        Steps:
        1. Price the product via the catalog
        2. Check availability (a separate lookup and a fresh draw)
        3. Increment the existing line or append a new one

        Returns:
            A copy of the new or updated line.

        Raises:
            ValueError: If quantity is not a positive integer. Raised before
                any catalog call.
            CatalogLookupError: If the product cannot be fetched.
            NotAvailableError: If the product is out of stock. The cart is
                left unchanged.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError(f"quantity must be an integer, got {quantity!r}")
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {quantity}")

        async with self._lock:
            logger.info(f"Adding {quantity} unit(s) of product {product_id} to cart")

            product = await self.catalog.get_product(product_id)

            if not await self.catalog.is_available(product_id):
                logger.error(f"Cannot add product {product_id}: {product.title} is out of stock")
                raise NotAvailableError(product_id, product.title)

            existing = self._find_line(product_id)
            if existing is not None:
                existing.add_quantity(quantity, product)
                logger.info(
                    f"Updated quantity for {product.title}: {existing.quantity} unit(s)"
                )
                return existing.copy()

            line = CartLine.from_product(product, quantity, product_id)
            self._items.append(line)
            logger.info(f"Added {product.title} to cart")
            return line.copy()

    def get_summary(self) -> CartSummary:
        """Compute item count, subtotal, discount and total.

        The discount and total are derived from the unrounded subtotal, then
        subtotal, discount and total are each rounded to cents. Rounding
        them independently can leave total off by 0.01 from
        subtotal - discount as displayed.
        """
        total_items = sum(line.quantity for line in self._items)
        subtotal = sum((line.subtotal for line in self._items), Decimal("0"))
        discount = calculate_discount(subtotal)
        total = subtotal - discount

        return CartSummary(
            items=tuple(line.copy() for line in self._items),
            total_items=total_items,
            subtotal=round_money(subtotal),
            discount=round_money(discount),
            total=round_money(total),
            has_discount=discount > 0,
        )

    async def validate_cart(self) -> CartValidation:
        """Re-check availability of every line, one at a time.

        Each check is an independent lookup, so a line that was available
        when added can come back unavailable here.
        """
        logger.info(f"Validating availability of {len(self._items)} product(s)")

        results: list[ValidationEntry] = []
        for line in list(self._items):
            available = await self.catalog.is_available(line.product_id)
            results.append(
                ValidationEntry(
                    product_id=line.product_id,
                    title=line.title,
                    quantity=line.quantity,
                    is_available=available,
                )
            )

        available_items = tuple(r for r in results if r.is_available)
        unavailable_items = tuple(r for r in results if not r.is_available)
        is_valid = not unavailable_items

        if is_valid:
            logger.info("All products in cart are available")
        else:
            logger.warning(f"{len(unavailable_items)} product(s) in cart are unavailable")

        return CartValidation(
            is_valid=is_valid,
            available_items=available_items,
            unavailable_items=unavailable_items,
            total_items=len(results),
        )

    def clear_cart(self) -> None:
        """Remove every line from the cart."""
        self._items = []
        logger.info("Cart cleared")

    def get_items(self) -> list[CartLine]:
        """Return copies of the cart lines, in insertion order."""
        return [line.copy() for line in self._items]

    def _find_line(self, product_id: Any) -> CartLine | None:
        for line in self._items:
            if line.product_id == product_id:
                return line
        return None
