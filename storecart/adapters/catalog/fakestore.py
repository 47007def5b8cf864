"""FakeStore catalog adapter.

Implements ProductSourcePort by querying a FakeStore-style REST API
(https://fakestoreapi.com) for product records.

Records are returned as decoded JSON with numbers parsed as Decimal;
pricing and enrichment are left to the core.
"""

import logging
import urllib.parse
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

import httpx

from storecart.core.ports import ProductSourcePort

logger = logging.getLogger(__name__)


def _path_segment(value: Any) -> str:
    """Quote a value for use as a single URL path segment."""
    return urllib.parse.quote(str(value), safe="")


class FakeStoreProductSource(ProductSourcePort):
    """FakeStore-backed product source via its public REST API."""

    def __init__(self, api_url: str, timeout: float = 10.0):
        """Initialize FakeStore adapter.

        Args:
            api_url: Base URL of the catalog API (e.g., https://fakestoreapi.com)
            timeout: Per-request timeout in seconds.
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.AsyncClient(
            base_url=self.api_url,
            timeout=timeout,
        )

    async def __aenter__(self) -> "FakeStoreProductSource":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.client.aclose()

    async def close(self) -> None:
        """Close the httpx client and clean up resources."""
        await self.client.aclose()

    async def fetch_product(self, product_id: Any) -> Mapping[str, Any]:
        """Return the raw record for a product.

        Args:
            product_id: Product identifier.

        Returns:
            Decoded product record.

        Raises:
            httpx.HTTPError: If the request fails or the status is not 2xx.
            ValueError: If the API answers with an empty body, which is
                how FakeStore reports an unknown id.
        """
        data = await self._get_json(f"/products/{_path_segment(product_id)}")
        if not data:
            raise ValueError(f"Product {product_id} not found")
        if not isinstance(data, Mapping):
            raise ValueError(
                f"Unexpected response for product {product_id}: {type(data).__name__}"
            )
        return data

    async def fetch_category(self, category: str) -> list[Mapping[str, Any]]:
        """Return the raw records for every product in a category.

        Args:
            category: Category name.

        Returns:
            Decoded product records in upstream order.

        Raises:
            httpx.HTTPError: If the request fails or the status is not 2xx.
            ValueError: If the response is not a list.
        """
        data = await self._get_json(f"/products/category/{_path_segment(category)}")
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError(
                f"Unexpected response for category {category}: {type(data).__name__}"
            )
        return data

    async def _get_json(self, path: str) -> Any:
        """Issue a GET and decode the JSON body.

        Raises:
            httpx.HTTPError: If the request fails or the status is not 2xx.
            ValueError: If the body is not valid JSON.
        """
        try:
            response = await self.client.get(path)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch {path} from catalog: {e}", exc_info=True)
            raise

        if not response.content:
            return None
        return response.json(parse_float=Decimal)
