"""Tests for CuratedAssetRegistry."""

import json

from walletcache.infra.metadata.curated import CuratedAssetRegistry

DATASET = {
    "xStocks": [
        {"symbol": "XYZ", "name": "XYZ Stock", "solanaAddress": "M1", "logoUrl": "u"},
        {"symbol": "NOADDR", "name": "No address"},
    ]
}


class TestCuratedAssetRegistry:
    def test_from_dataset(self):
        registry = CuratedAssetRegistry.from_dataset(DATASET)
        assert len(registry) == 1
        assert "M1" in registry
        entry = registry.lookup("M1")
        assert (entry.symbol, entry.name, entry.logo_uri) == ("XYZ", "XYZ Stock", "u")
        assert registry.lookup("M2") is None

    def test_load_from_path(self, tmp_path):
        path = tmp_path / "stocks.json"
        path.write_text(json.dumps(DATASET))

        registry = CuratedAssetRegistry.load(str(path))
        assert registry.lookup("M1").symbol == "XYZ"

    def test_load_packaged_dataset(self):
        registry = CuratedAssetRegistry.load()
        assert len(registry) > 0
        for mint in ("XsDoVfqeBukxuZHWhdvWHBhgEHjGNst4MLodqsJHzoB",):
            assert registry.lookup(mint).symbol == "TSLAx"
