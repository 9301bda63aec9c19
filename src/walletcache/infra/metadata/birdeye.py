"""Birdeye token metadata via the app's ``/api/birdeye`` proxy route."""

import logging

from walletcache.domain.models.metadata import UNKNOWN_NAME, UNKNOWN_SYMBOL, TokenMetadata
from walletcache.infra.http.rate_limited_client import RateLimitedClient

logger = logging.getLogger(__name__)

PROXY_PATH = "/api/birdeye"


class BirdeyeMetadataProvider:
    def __init__(self, http_client: RateLimitedClient, base_url: str) -> None:
        self._http = http_client
        self._url = base_url.rstrip("/") + PROXY_PATH

    async def get_metadata(self, addresses: list[str]) -> dict[str, dict]:
        """Batch lookup. Returns ``{address: {symbol, name, logoURI}}``; empty on any non-success reply."""
        response = await self._http.get(self._url, params={"addresses": ",".join(addresses)})
        if not response.is_success:
            logger.debug("Birdeye proxy returned %d", response.status_code)
            return {}
        body = response.json()
        if not body.get("success"):
            return {}
        return body.get("data") or {}

    async def lookup(self, mint: str) -> TokenMetadata | None:
        data = await self.get_metadata([mint])
        info = data.get(mint)
        if not info:
            return None
        return TokenMetadata(
            symbol=info.get("symbol") or UNKNOWN_SYMBOL,
            name=info.get("name") or UNKNOWN_NAME,
            logo_uri=info.get("logoURI") or "",
        )
