"""Sheety meal sheet API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class MealSheetClient(Protocol):
    """Interface for reading the raw meal sheet."""

    async def fetch_rows(self) -> object:
        """Fetch the sheet and return the decoded JSON payload."""


@dataclass
class HttpxMealSheetClient(MealSheetClient):
    """HTTPX-backed meal sheet client."""

    url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(cls, url: str, timeout_seconds: float = 15) -> "HttpxMealSheetClient":
        """Create a sheet client with a managed httpx session."""
        return cls(
            url=url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_rows(self) -> object:
        """Fetch all rows of the meal sheet."""
        response = await self.http_client.get(self.url, timeout=self.timeout_seconds)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
