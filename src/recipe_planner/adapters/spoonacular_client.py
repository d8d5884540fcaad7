"""Spoonacular nutrition API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class SpoonacularClient(Protocol):
    """Interface for Spoonacular API interactions."""

    async def parse_ingredients(
        self, ingredient_list: str, servings: int
    ) -> list[dict[str, object]]:
        """Parse newline-separated ingredients and return raw API data."""


@dataclass
class HttpxSpoonacularClient(SpoonacularClient):
    """HTTPX-backed Spoonacular client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxSpoonacularClient":
        """Create a Spoonacular client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def parse_ingredients(
        self, ingredient_list: str, servings: int
    ) -> list[dict[str, object]]:
        """Parse ingredients with nutrition included."""
        url = f"{self.base_url}/recipes/parseIngredients"
        response = await self.http_client.post(
            url,
            params={"apiKey": self.api_key},
            data={
                "ingredientList": ingredient_list,
                "servings": str(servings),
                "includeNutrition": "true",
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
