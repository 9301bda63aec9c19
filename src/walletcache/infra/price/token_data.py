"""Per-mint market data from the Jupiter price API."""

import logging

from pydantic import BaseModel

from walletcache.infra.http.rate_limited_client import RateLimitedClient

logger = logging.getLogger(__name__)


class TokenMarketData(BaseModel):
    mint: str
    price: float
    price_change_24h: float | None = None


class TokenDataProvider:
    """Centralized price lookup: one mint in, market data (or None) out."""

    def __init__(self, http_client: RateLimitedClient, base_url: str) -> None:
        self._http = http_client
        self._url = base_url

    async def fetch_token_data(self, mint: str) -> TokenMarketData | None:
        """``GET {base_url}?ids=<mint>`` -> ``{<mint>: {usdPrice, priceChange24h, ...}}``."""
        response = await self._http.get(self._url, params={"ids": mint})
        if response.status_code != 200:
            logger.debug("Price API returned %d for %s", response.status_code, mint)
            return None

        data = response.json()
        entry = data.get(mint) if isinstance(data, dict) else None
        if not entry or entry.get("usdPrice") is None:
            return None
        return TokenMarketData(
            mint=mint,
            price=float(entry["usdPrice"]),
            price_change_24h=entry.get("priceChange24h"),
        )
