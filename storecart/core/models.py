"""Domain models for the storecart pricing core.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any

from .pricing import calculate_tax, is_expensive


@dataclass(frozen=True)
class Product:
    """A catalog product enriched with tier and tax information.

    The core's normalized representation of an upstream product record.
    Derived fields are computed on creation and never stored elsewhere;
    every lookup builds a fresh Product.
    """

    id: Any  # opaque upstream key
    title: str
    price: Decimal
    category: str
    image: str = ""
    description: str = ""
    is_expensive: bool = field(init=False)
    price_with_tax: Decimal = field(init=False)

    def __post_init__(self) -> None:
        """Validate the base price and derive the tax tier."""
        if not isinstance(self.price, Decimal):
            raise TypeError(
                f"price must be a Decimal, got {type(self.price).__name__}"
            )
        if self.price < 0:
            raise ValueError(f"price must be non-negative, got {self.price}")
        object.__setattr__(self, "is_expensive", is_expensive(self.price))
        object.__setattr__(self, "price_with_tax", calculate_tax(self.price))


@dataclass
class CartLine:
    """One product's entry within a cart.

    Intentionally mutable: the cart increments the quantity of an
    existing line instead of replacing it. ``is_expensive`` is copied
    from the product when the line is created and is not refreshed.
    """

    product_id: Any
    title: str
    unit_price: Decimal
    unit_price_with_tax: Decimal
    quantity: int
    is_expensive: bool
    subtotal: Decimal = field(init=False)

    def __post_init__(self) -> None:
        """Validate quantity and compute the line subtotal."""
        if self.quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {self.quantity}")
        self.subtotal = self.quantity * self.unit_price_with_tax

    @classmethod
    def from_product(
        cls, product: Product, quantity: int, product_id: Any = None
    ) -> "CartLine":
        """Create a new line for a freshly fetched product.

        ``product_id`` is the key the caller added the product under and
        defaults to the id reported by the catalog.
        """
        return cls(
            product_id=product.id if product_id is None else product_id,
            title=product.title,
            unit_price=product.price,
            unit_price_with_tax=product.price_with_tax,
            quantity=quantity,
            is_expensive=product.is_expensive,
        )

    def add_quantity(self, quantity: int, product: Product) -> None:
        """Increase the quantity and recompute the subtotal.

        Unit prices follow the latest lookup of the product so the subtotal
        always equals quantity times the taxed unit price.

        Args:
            quantity: Units to add (>= 1).
            product: The product as just fetched for this add.
        """
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {quantity}")
        self.quantity += quantity
        self.unit_price = product.price
        self.unit_price_with_tax = product.price_with_tax
        self.subtotal = self.quantity * self.unit_price_with_tax

    def copy(self) -> "CartLine":
        """Return an independent copy of this line."""
        return replace(self)


@dataclass(frozen=True)
class CartSummary:
    """Totals for a cart at a point in time."""

    items: tuple[CartLine, ...]  # copies, detached from the cart
    total_items: int
    subtotal: Decimal
    discount: Decimal
    total: Decimal
    has_discount: bool


@dataclass(frozen=True)
class ValidationEntry:
    """Availability verdict for one cart line."""

    product_id: Any
    title: str
    quantity: int
    is_available: bool


@dataclass(frozen=True)
class CartValidation:
    """Result of re-checking availability for every cart line."""

    is_valid: bool
    available_items: tuple[ValidationEntry, ...]
    unavailable_items: tuple[ValidationEntry, ...]
    total_items: int  # number of lines checked
