"""TokenPriceService — prices a set of mints one at a time, defaulting failures to 0."""

import logging
from collections.abc import Iterable

from walletcache.infra.price.token_data import TokenDataProvider

logger = logging.getLogger(__name__)


class TokenPriceService:
    def __init__(self, provider: TokenDataProvider) -> None:
        self._provider = provider

    async def fetch_token_prices(self, mints: Iterable[str]) -> dict[str, float]:
        prices: dict[str, float] = {}
        for mint in mints:
            try:
                data = await self._provider.fetch_token_data(mint)
                prices[mint] = (data.price if data else 0.0) or 0.0
            except Exception as e:
                logger.debug("Price lookup failed for %s: %s", mint, e)
                prices[mint] = 0.0
        return prices
