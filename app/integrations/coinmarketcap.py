from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from app.errors import UpstreamPayloadError, UpstreamRequestError


class CoinMarketCapClient:
    """Minimal CoinMarketCap listings client authenticated with a pro API key."""

    DEFAULT_BASE_URL = "https://pro-api.coinmarketcap.com"
    LISTINGS_PATH = "/v1/cryptocurrency/listings/latest"

    def __init__(
        self,
        api_key: str,
        session: Optional[Any] = None,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        limit: int = 100,
    ) -> None:
        if not api_key:
            raise ValueError("api_key is required")

        self.api_key = api_key
        self.session = session or requests
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.limit = limit

    def get_listings(self) -> List[Dict[str, Any]]:
        try:
            response = self.session.get(
                f"{self.base_url}{self.LISTINGS_PATH}",
                headers={
                    "X-CMC_PRO_API_KEY": self.api_key,
                    "Accept": "application/json",
                },
                params={"start": 1, "limit": self.limit, "convert": "USD"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise UpstreamRequestError(f"listings request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamPayloadError("listings response is not valid JSON") from exc

        if not isinstance(payload, dict):
            raise UpstreamPayloadError("listings response must be an object")
        data = payload.get("data")
        if not isinstance(data, list):
            raise UpstreamPayloadError("listings response is missing a data list")
        return data
