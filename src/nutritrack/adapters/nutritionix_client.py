"""Nutritionix food lookup API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class FoodLookupClient(Protocol):
    """Interface for remote food lookups."""

    async def search_instant(self, query: str) -> dict[str, object]:
        """Search foods by name and return raw API data."""

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        """Resolve a free-text food description to nutrient data."""


@dataclass
class HttpxNutritionixClient(FoodLookupClient):
    """HTTPX-backed Nutritionix client."""

    app_id: str
    app_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, app_id: str, app_key: str, base_url: str
    ) -> "HttpxNutritionixClient":
        """Create a client with a managed httpx session."""
        return cls(
            app_id=app_id,
            app_key=app_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
        )

    async def search_instant(self, query: str) -> dict[str, object]:
        """Search common and branded foods by name."""
        response = await self.http_client.get(
            f"{self.base_url}/search/instant",
            params={"query": query},
            headers=self._headers(),
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        """Fetch nutrients for a natural-language food query."""
        response = await self.http_client.post(
            f"{self.base_url}/natural/nutrients",
            json={"query": query},
            headers=self._headers(),
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "x-app-id": self.app_id,
            "x-app-key": self.app_key,
            "x-remote-user-id": "0",
        }
