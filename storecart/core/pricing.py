"""Pricing rules for catalog products and cart totals.

This module implements the business rules that turn a base price into a
taxed price and a cart subtotal into a discount. All amounts are Decimal.

Pure functions with no side effects.
"""

from decimal import ROUND_HALF_UP, Decimal

EXPENSIVE_THRESHOLD = Decimal("100")
STANDARD_TAX_RATE = Decimal("0.10")
EXPENSIVE_TAX_RATE = Decimal("0.15")

DISCOUNT_THRESHOLD = Decimal("500")
DISCOUNT_RATE = Decimal("0.05")

# Expensive products are in stock when a uniform draw exceeds this value
AVAILABILITY_THRESHOLD = 0.3

_CENTS = Decimal("0.01")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a price from an upstream record to Decimal.

    Floats go through str() so that 19.99 stays 19.99 rather than the
    nearest binary fraction.
    """
    if isinstance(value, bool):
        raise TypeError("price must be a number, not a bool")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def is_expensive(price: Decimal) -> bool:
    """Products strictly above $100 fall into the expensive tier."""
    return price > EXPENSIVE_THRESHOLD


def calculate_tax(price: Decimal) -> Decimal:
    """Return the price with tax included.

    Expensive products carry 15% tax, everything else 10%.
    """
    rate = EXPENSIVE_TAX_RATE if is_expensive(price) else STANDARD_TAX_RATE
    return price + price * rate


def calculate_discount(subtotal: Decimal) -> Decimal:
    """5% off the whole subtotal once it exceeds $500, nothing below.

    The threshold is a cliff: the discount applies to the full amount,
    not only the part above $500.
    """
    if subtotal > DISCOUNT_THRESHOLD:
        return subtotal * DISCOUNT_RATE
    return Decimal("0")


def round_money(amount: Decimal) -> Decimal:
    """Round to cents, halves away from zero."""
    return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
