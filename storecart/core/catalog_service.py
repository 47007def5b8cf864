"""Catalog lookup for the storecart pricing core.

This module translates product identifiers into priced products and
availability verdicts, using a product source for remote records and
a random source for the stock simulation.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .errors import CatalogLookupError
from .models import Product
from .ports import CatalogPort, ProductSourcePort, RandomSourcePort
from .pricing import AVAILABILITY_THRESHOLD, to_decimal

logger = logging.getLogger(__name__)


def product_from_record(record: Mapping[str, Any]) -> Product:
    """Build a priced Product from a raw catalog record.

    Only ``id, title, price, description, category, image`` are read.
    ``description`` and ``image`` are optional since category listings
    may omit them.

    Raises:
        KeyError: If a required field is missing.
        TypeError, ValueError: If the price is not a valid amount.
    """
    return Product(
        id=record["id"],
        title=record["title"],
        price=to_decimal(record["price"]),
        category=record["category"],
        image=record.get("image") or "",
        description=record.get("description") or "",
    )


class CatalogService(CatalogPort):
    """Implements priced product lookup and the stock simulation.

    Stateless aside from its collaborators: nothing is cached, so every
    call reaches the product source.
    """

    def __init__(self, source: ProductSourcePort, random_source: RandomSourcePort):
        self.source = source
        self.random_source = random_source

    async def get_product(self, product_id: Any) -> Product:
        """Fetch a product and enrich it with its tax tier.

        A single fetch is issued; failures are not retried.

        Raises:
            CatalogLookupError: If the fetch fails, the catalog answers with
                a non-success status, or the record cannot be priced.
        """
        logger.info(f"Looking up product {product_id}")
        try:
            record = await self.source.fetch_product(product_id)
            product = product_from_record(record)
        except Exception as e:
            logger.error(f"Failed to look up product {product_id}: {e}")
            raise CatalogLookupError(
                f"Could not fetch product {product_id}: {e}",
                product_id=product_id,
            ) from e

        logger.debug(
            f"Found product {product.id}: {product.title} "
            f"(price={product.price}, with_tax={product.price_with_tax})"
        )
        return product

    async def get_products_by_category(self, category: str) -> list[Product]:
        """Fetch and enrich every product in a category.

        Raises:
            CatalogLookupError: If the fetch fails or any record cannot be
                priced. No partial list is returned.
        """
        logger.info(f"Looking up products in category {category!r}")
        try:
            records = await self.source.fetch_category(category)
            products = [product_from_record(record) for record in records]
        except Exception as e:
            logger.error(f"Failed to look up category {category!r}: {e}")
            raise CatalogLookupError(
                f"Could not fetch products in category {category}: {e}",
                category=category,
            ) from e

        logger.info(f"Found {len(products)} products in category {category!r}")
        return products

    async def is_available(self, product_id: Any) -> bool:
        """Estimate stock for a product.

        The product is fetched again on every call. Products in the
        standard tier are always available; expensive ones are available
        when a fresh uniform draw exceeds 0.3 (roughly 70% of calls).

        A product that cannot be fetched is reported as unavailable
        rather than raising.
        """
        try:
            product = await self.get_product(product_id)
        except CatalogLookupError as e:
            logger.warning(
                f"Treating product {product_id} as unavailable: {e.message}"
            )
            return False

        if not product.is_expensive:
            return True
        return self.random_source.draw() > AVAILABILITY_THRESHOLD
