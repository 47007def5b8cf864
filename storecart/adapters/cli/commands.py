"""CLI command implementations for storecart.

Provides shopper actions through a command-line interface.

This adapter maps CLI commands (product, category, available, add, summary,
validate, items, clear) to CatalogPort and CartPort operations. It handles
CLI-specific formatting and error reporting.
"""

import logging
from decimal import Decimal
from typing import Any

from storecart.core.errors import StoreCartError
from storecart.core.models import (
    CartLine,
    CartSummary,
    CartValidation,
    Product,
    ValidationEntry,
)
from storecart.core.ports import CartPort, CatalogPort

logger = logging.getLogger(__name__)


def _money(amount: Decimal) -> str:
    return str(amount)


def product_to_dict(product: Product) -> dict[str, Any]:
    """Convert a Product to a JSON-ready dictionary."""
    return {
        "id": product.id,
        "title": product.title,
        "price": _money(product.price),
        "description": product.description,
        "category": product.category,
        "image": product.image,
        "is_expensive": product.is_expensive,
        "price_with_tax": _money(product.price_with_tax),
    }


def line_to_dict(line: CartLine) -> dict[str, Any]:
    """Convert a CartLine to a JSON-ready dictionary."""
    return {
        "product_id": line.product_id,
        "title": line.title,
        "unit_price": _money(line.unit_price),
        "unit_price_with_tax": _money(line.unit_price_with_tax),
        "quantity": line.quantity,
        "subtotal": _money(line.subtotal),
        "is_expensive": line.is_expensive,
    }


def summary_to_dict(summary: CartSummary) -> dict[str, Any]:
    """Convert a CartSummary to a JSON-ready dictionary."""
    return {
        "items": [line_to_dict(line) for line in summary.items],
        "total_items": summary.total_items,
        "subtotal": _money(summary.subtotal),
        "discount": _money(summary.discount),
        "total": _money(summary.total),
        "has_discount": summary.has_discount,
    }


def _entry_to_dict(entry: ValidationEntry) -> dict[str, Any]:
    return {
        "product_id": entry.product_id,
        "title": entry.title,
        "quantity": entry.quantity,
        "is_available": entry.is_available,
    }


def validation_to_dict(validation: CartValidation) -> dict[str, Any]:
    """Convert a CartValidation to a JSON-ready dictionary."""
    return {
        "is_valid": validation.is_valid,
        "available_items": [_entry_to_dict(e) for e in validation.available_items],
        "unavailable_items": [_entry_to_dict(e) for e in validation.unavailable_items],
        "total_items": validation.total_items,
    }


class CLICommandHandler:
    """Handles CLI commands by delegating to CatalogPort and CartPort.

    Domain failures (lookup errors, out-of-stock products, invalid
    quantities) are reported as ``status: error`` results rather than
    raised, so an interactive session survives them.
    """

    def __init__(self, catalog: CatalogPort, cart: CartPort):
        """Initialize the CLI command handler.

        Args:
            catalog: CatalogPort implementation for product lookups.
            cart: CartPort implementation for cart operations.
        """
        self.catalog = catalog
        self.cart = cart

    async def get_product(self, product_id: Any) -> dict[str, Any]:
        """Look up a single priced product."""
        try:
            product = await self.catalog.get_product(product_id)
            return {
                "status": "success",
                "operation": "product",
                "data": product_to_dict(product),
            }
        except StoreCartError as e:
            logger.error(f"Failed to get product: {e}")
            return _error("product", e, product_id=product_id)

    async def list_category(self, category: str) -> dict[str, Any]:
        """List every priced product in a category."""
        try:
            products = await self.catalog.get_products_by_category(category)
            return {
                "status": "success",
                "operation": "category",
                "category": category,
                "count": len(products),
                "data": [product_to_dict(p) for p in products],
            }
        except StoreCartError as e:
            logger.error(f"Failed to list category: {e}")
            return _error("category", e, category=category)

    async def check_availability(self, product_id: Any) -> dict[str, Any]:
        """Report whether a product is currently in stock."""
        available = await self.catalog.is_available(product_id)
        return {
            "status": "success",
            "operation": "available",
            "product_id": product_id,
            "is_available": available,
        }

    async def add_product(self, product_id: Any, quantity: int = 1) -> dict[str, Any]:
        """Add units of a product to the cart.

        Args:
            product_id: Product identifier.
            quantity: Units to add.

        Returns:
            Dictionary with status and the resulting line.
        """
        try:
            line = await self.cart.add_product(product_id, quantity)
        except (StoreCartError, ValueError) as e:
            logger.error(f"Failed to add product to cart: {e}")
            return _error("add", e, product_id=product_id)

        return {
            "status": "success",
            "operation": "add",
            "message": f"{line.title}: {line.quantity} unit(s) in cart",
            "data": line_to_dict(line),
        }

    def get_summary(self, format: str = "json") -> dict[str, Any]:
        """Show cart totals.

        Args:
            format: Output format ('json', 'text'). Default 'json'.
        """
        summary = self.cart.get_summary()

        if format == "json":
            return {
                "status": "success",
                "operation": "summary",
                "data": summary_to_dict(summary),
            }

        elif format == "text":
            return {
                "status": "success",
                "operation": "summary",
                "data": self._format_summary_as_text(summary),
            }

        else:
            return {
                "status": "error",
                "operation": "summary",
                "message": f"Unsupported format: {format}",
            }

    async def validate_cart(self) -> dict[str, Any]:
        """Re-check availability of every line in the cart."""
        validation = await self.cart.validate_cart()
        return {
            "status": "success",
            "operation": "validate",
            "data": validation_to_dict(validation),
        }

    def get_items(self) -> dict[str, Any]:
        """List the lines currently in the cart."""
        items = self.cart.get_items()
        return {
            "status": "success",
            "operation": "items",
            "count": len(items),
            "data": [line_to_dict(line) for line in items],
        }

    def clear_cart(self) -> dict[str, Any]:
        """Empty the cart."""
        self.cart.clear_cart()
        return {
            "status": "success",
            "operation": "clear",
            "message": "Cart cleared",
        }

    def _format_summary_as_text(self, summary: CartSummary) -> str:
        """Format a cart summary as human-readable text."""
        lines = []

        if not summary.items:
            lines.append("Cart is empty")
        for item in summary.items:
            lines.append(
                f"{item.quantity} x {item.title} @ {item.unit_price_with_tax} = {item.subtotal}"
            )
        lines.append("")

        lines.append(f"Items: {summary.total_items}")
        lines.append(f"Subtotal: {summary.subtotal}")
        if summary.has_discount:
            lines.append(f"Discount: -{summary.discount}")
        lines.append(f"Total: {summary.total}")

        return "\n".join(lines)


def _error(operation: str, error: Exception, **context: Any) -> dict[str, Any]:
    result: dict[str, Any] = {
        "status": "error",
        "operation": operation,
        "message": str(error),
    }
    if isinstance(error, StoreCartError):
        result["code"] = error.code
    result.update(context)
    return result


async def run_command(
    catalog: CatalogPort,
    cart: CartPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        catalog: CatalogPort implementation.
        cart: CartPort implementation.
        command: Command name ('product', 'category', 'available', 'add',
            'summary', 'validate', 'items', 'clear').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If the command is not recognized or a required
            argument is missing.
    """
    handler = CLICommandHandler(catalog, cart)

    if command in {"product", "available", "add"} and "product_id" not in args:
        raise ValueError("Missing required parameter: product_id")

    if command == "product":
        return await handler.get_product(args["product_id"])

    elif command == "category":
        if "category" not in args:
            raise ValueError("Missing required parameter: category")
        return await handler.list_category(args["category"])

    elif command == "available":
        return await handler.check_availability(args["product_id"])

    elif command == "add":
        return await handler.add_product(
            args["product_id"],
            args.get("quantity", 1),
        )

    elif command == "summary":
        return handler.get_summary(args.get("format", "json"))

    elif command == "validate":
        return await handler.validate_cart()

    elif command == "items":
        return handler.get_items()

    elif command == "clear":
        return handler.clear_cart()

    else:
        raise ValueError(f"Unknown command: {command}")
