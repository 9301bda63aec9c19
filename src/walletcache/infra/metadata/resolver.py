"""Token metadata resolution: first live lookup that resolves wins, curated data overrides, placeholder last."""

import logging
from collections.abc import Awaitable, Callable, Sequence

from walletcache.domain.models.metadata import PLACEHOLDER_METADATA, TokenMetadata
from walletcache.infra.metadata.curated import CuratedAssetRegistry

logger = logging.getLogger(__name__)

MetadataLookup = Callable[[str], Awaitable[TokenMetadata | None]]


class TokenMetadataResolver:
    def __init__(self, lookups: Sequence[MetadataLookup], curated: CuratedAssetRegistry | None = None) -> None:
        self._lookups = list(lookups)
        self._curated = curated

    async def _live_lookup(self, mint: str) -> TokenMetadata | None:
        for lookup in self._lookups:
            try:
                result = await lookup(mint)
            except Exception as e:
                logger.debug("Metadata lookup %s failed for %s: %s", getattr(lookup, "__qualname__", lookup), mint, e)
                continue
            if result is not None:
                return result
        return None

    async def resolve(self, mint: str) -> TokenMetadata:
        metadata = await self._live_lookup(mint)
        if self._curated is not None:
            curated = self._curated.lookup(mint)
            if curated is not None:
                metadata = curated
        return metadata or PLACEHOLDER_METADATA
