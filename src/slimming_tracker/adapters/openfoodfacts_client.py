"""Open Food Facts API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class OpenFoodFactsClient(Protocol):
    """Interface for Open Food Facts product lookups."""

    async def get_product(self, barcode: str) -> dict[str, object]:
        """Fetch a product by barcode and return raw API data."""

    async def search_products(
        self, query: str, page: int = 1, page_size: int = 20
    ) -> dict[str, object]:
        """Search products by name and return raw API data."""


@dataclass
class HttpxOpenFoodFactsClient(OpenFoodFactsClient):
    """HTTPX-backed Open Food Facts client."""

    base_url: str
    search_url: str
    country: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, base_url: str, search_url: str, country: str, user_agent: str
    ) -> "HttpxOpenFoodFactsClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url,
            search_url=search_url,
            country=country,
            http_client=httpx.AsyncClient(headers={"User-Agent": user_agent}),
        )

    async def get_product(self, barcode: str) -> dict[str, object]:
        """Fetch a product by barcode."""
        url = f"{self.base_url}/product/{barcode}"
        response = await self.http_client.get(url, timeout=15)
        if response.status_code == httpx.codes.NOT_FOUND:
            return {"code": barcode, "status": 0}
        response.raise_for_status()
        return _decode(response)

    async def search_products(
        self, query: str, page: int = 1, page_size: int = 20
    ) -> dict[str, object]:
        """Full-text search, restricted to one country and sorted by scans."""
        response = await self.http_client.get(
            self.search_url,
            params={
                "search_terms": query,
                "search_simple": 1,
                "action": "process",
                "json": 1,
                "page": page,
                "page_size": page_size,
                "tagtype_0": "countries",
                "tag_contains_0": "contains",
                "tag_0": self.country,
                "sort_by": "unique_scans_n",
            },
            timeout=15,
        )
        response.raise_for_status()
        return _decode(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _decode(response: httpx.Response) -> dict[str, object]:
    """Parse a JSON body, treating anything else as a transport failure."""
    try:
        payload = response.json()
    except ValueError as exc:
        raise httpx.DecodingError(
            f"Invalid JSON from Open Food Facts: {exc}", request=response.request
        ) from exc
    if not isinstance(payload, dict):
        raise httpx.DecodingError(
            "Unexpected Open Food Facts payload", request=response.request
        )
    return payload
