"""HTTP client for the foods API used by the pages."""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx


class FoodsApiClient(Protocol):
    """Interface for fetching food data over HTTP."""

    async def list_foods(self) -> list[dict[str, object]]:
        """Fetch every food from /api/foods/all."""

    async def get_food(self, slug: str) -> dict[str, object]:
        """Fetch one food record from /api/foods/<slug>."""


@dataclass
class HttpxFoodsApiClient(FoodsApiClient):
    """HTTPX-backed foods API client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10.0

    @classmethod
    def create(cls, base_url: str, timeout: float = 10.0) -> "HttpxFoodsApiClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def list_foods(self) -> list[dict[str, object]]:
        """Fetch every food."""
        response = await self.http_client.get(
            f"{self.base_url}/api/foods/all", timeout=self.timeout
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise ValueError("Expected a JSON array from /api/foods/all")
        return payload

    async def get_food(self, slug: str) -> dict[str, object]:
        """Fetch one food record by slug."""
        response = await self.http_client.get(
            f"{self.base_url}/api/foods/{quote(slug, safe='')}", timeout=self.timeout
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object for food {slug!r}")
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
