"""Curated asset list (tokenized stocks) whose metadata overrides live lookups."""

import json
import logging
from importlib import resources
from pathlib import Path

from walletcache.domain.models.metadata import TokenMetadata

logger = logging.getLogger(__name__)


class CuratedAssetRegistry:
    def __init__(self, assets: dict[str, TokenMetadata]) -> None:
        self._assets = assets

    @classmethod
    def from_dataset(cls, dataset: dict) -> "CuratedAssetRegistry":
        """Build from ``{"xStocks": [{symbol, name, solanaAddress, logoUrl}, ...]}``."""
        assets: dict[str, TokenMetadata] = {}
        for stock in dataset.get("xStocks", []):
            address = stock.get("solanaAddress")
            if not address:
                continue
            assets[address] = TokenMetadata(
                symbol=stock["symbol"],
                name=stock["name"],
                logo_uri=stock.get("logoUrl") or "",
            )
        return cls(assets)

    @classmethod
    def load(cls, path: str = "") -> "CuratedAssetRegistry":
        """Load from ``path``, or from the packaged ``data/stocks.json`` when empty."""
        if path:
            text = Path(path).read_text(encoding="utf-8")
        else:
            text = resources.files("walletcache").joinpath("data/stocks.json").read_text(encoding="utf-8")
        registry = cls.from_dataset(json.loads(text))
        logger.debug("Loaded %d curated assets", len(registry))
        return registry

    def lookup(self, mint: str) -> TokenMetadata | None:
        return self._assets.get(mint)

    def __len__(self) -> int:
        return len(self._assets)

    def __contains__(self, mint: object) -> bool:
        return mint in self._assets
