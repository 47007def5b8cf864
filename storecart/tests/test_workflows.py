"""End-to-end integration tests for core workflows.

These tests verify that CatalogService and CartService work together
correctly over the fake product source: first incrementally (catalog
alone, then the cart on top), then all at once.
"""

from decimal import Decimal

import pytest

from storecart.core.cart_service import CartService
from storecart.core.catalog_service import CatalogService
from storecart.core.errors import CatalogLookupError, NotAvailableError
from storecart.tests.fakes import FakeProductSource, ScriptedRandomSource, make_record

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def product_source() -> FakeProductSource:
    """Create a product source stocked with a small store."""
    source = FakeProductSource()
    source.add_products(
        [
            make_record(1, "Laptop Pro", "1500", category="electronics"),
            make_record(2, "Gaming Mouse", "50", category="electronics"),
            make_record(3, "Basic T-shirt", "25", category="clothing"),
            make_record(4, "Smartwatch", "250", category="electronics"),
        ]
    )
    return source


@pytest.fixture
def random_source() -> ScriptedRandomSource:
    """Create a random source that makes expensive products available by default."""
    return ScriptedRandomSource(default=0.99)


@pytest.fixture
def catalog(
    product_source: FakeProductSource, random_source: ScriptedRandomSource
) -> CatalogService:
    """Create the catalog service."""
    return CatalogService(source=product_source, random_source=random_source)


@pytest.fixture
def cart(catalog: CatalogService) -> CartService:
    """Create the cart service over the catalog."""
    return CartService(catalog=catalog)


# ============================================================================
# Incremental integration
# ============================================================================


@pytest.mark.asyncio
async def test_catalog_alone_prices_products(catalog: CatalogService) -> None:
    """Level 1: the catalog prices products from the source."""
    laptop = await catalog.get_product(1)
    shirt = await catalog.get_product(3)

    assert laptop.price_with_tax == Decimal("1725")
    assert shirt.price_with_tax == Decimal("27.5")


@pytest.mark.asyncio
async def test_cart_over_catalog_adds_and_totals(
    cart: CartService, product_source: FakeProductSource
) -> None:
    """Level 2: the cart prices lines through the catalog."""
    await cart.add_product(1, 1)
    await cart.add_product(2, 3)

    summary = cart.get_summary()

    assert summary.total_items == 4
    assert summary.subtotal == Decimal("1890.00")
    assert summary.discount == Decimal("94.50")
    assert summary.total == Decimal("1795.50")
    # Each add fetches once to price and once more to check stock
    assert product_source.fetch_product_calls == [1, 1, 2, 2]


@pytest.mark.asyncio
async def test_repeated_add_accumulates_quantity(cart: CartService) -> None:
    """Level 2: same product twice produces one line."""
    await cart.add_product(4, 1)
    line = await cart.add_product(4, 2)

    assert line.quantity == 3
    assert line.subtotal == 3 * Decimal("287.5")
    assert len(cart.get_items()) == 1


# ============================================================================
# Big-bang integration
# ============================================================================


@pytest.mark.asyncio
async def test_full_shopping_session(
    cart: CartService,
    catalog: CatalogService,
    random_source: ScriptedRandomSource,
) -> None:
    """Browse, add, fail an add, validate, and check out totals."""
    electronics = await catalog.get_products_by_category("electronics")
    assert [p.title for p in electronics] == ["Laptop Pro", "Gaming Mouse", "Smartwatch"]

    await cart.add_product(1, 1)
    await cart.add_product(3, 2)

    # The smartwatch is out of stock on this draw
    random_source.queue(0.05)
    with pytest.raises(NotAvailableError, match="Smartwatch"):
        await cart.add_product(4, 1)
    assert [line.product_id for line in cart.get_items()] == [1, 3]

    # Laptop passes validation on the default draw
    validation = await cart.validate_cart()
    assert validation.is_valid is True
    assert validation.total_items == 2

    summary = cart.get_summary()
    assert summary.subtotal == Decimal("1780.00")
    assert summary.discount == Decimal("89.00")
    assert summary.total == Decimal("1691.00")

    cart.clear_cart()
    assert cart.get_summary().total_items == 0


@pytest.mark.asyncio
async def test_catalog_outage_during_session(
    cart: CartService, product_source: FakeProductSource
) -> None:
    """Adds fail loudly and validation fails closed while the source is down."""
    await cart.add_product(3, 1)

    product_source.set_error(ConnectionError("Service unavailable"))

    with pytest.raises(CatalogLookupError, match="Service unavailable"):
        await cart.add_product(2, 1)

    validation = await cart.validate_cart()
    assert validation.is_valid is False
    assert [e.product_id for e in validation.unavailable_items] == [3]

    # Lines are untouched by the outage
    assert cart.get_items()[0].quantity == 1


@pytest.mark.asyncio
async def test_stock_can_change_between_add_and_validate(
    cart: CartService, random_source: ScriptedRandomSource
) -> None:
    """Availability at add time is not carried into validation."""
    random_source.queue(0.8)
    await cart.add_product(1, 1)

    random_source.queue(0.1)
    validation = await cart.validate_cart()

    assert validation.is_valid is False
    assert validation.unavailable_items[0].title == "Laptop Pro"
    assert random_source.draws == [0.8, 0.1]
