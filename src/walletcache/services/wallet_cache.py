"""Wallet snapshot cache on top of the key-value storage facility.

Two freshness windows apply to the same entry: prefetch skips network work
while an entry is under 5 minutes old, and readers accept entries under
10 minutes old.
"""

import logging
import time
from collections.abc import Callable

from walletcache.domain.models.wallet import WalletSnapshot
from walletcache.storage.local_storage import KeyValueStore

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "wallet_cache_"
PREFETCH_FRESHNESS_MS = 5 * 60 * 1000
READ_FRESHNESS_MS = 10 * 60 * 1000

Clock = Callable[[], int]


def now_ms() -> int:
    return int(time.time() * 1000)


def cache_key(address: str) -> str:
    return f"{CACHE_KEY_PREFIX}{address}"


class WalletCache:
    def __init__(self, storage: KeyValueStore | None, clock: Clock = now_ms) -> None:
        self._storage = storage
        self._clock = clock

    @property
    def available(self) -> bool:
        return self._storage is not None

    def now(self) -> int:
        return self._clock()

    async def load(self, address: str) -> WalletSnapshot | None:
        """Stored snapshot regardless of age. Missing, unreadable or malformed entries read as None."""
        if self._storage is None:
            return None
        try:
            raw = await self._storage.get_item(cache_key(address))
            if not raw:
                return None
            return WalletSnapshot.model_validate_json(raw)
        except Exception as e:
            logger.debug("Ignoring unreadable cache entry for %s: %s", address, e)
            return None

    def _age_ms(self, snapshot: WalletSnapshot) -> int:
        return self._clock() - snapshot.timestamp

    async def is_fresh(self, address: str) -> bool:
        """True when a prefetch for ``address`` would be redundant."""
        snapshot = await self.load(address)
        if snapshot is None:
            return False
        age = self._age_ms(snapshot)
        if age < PREFETCH_FRESHNESS_MS:
            logger.info("Skipping prefetch for %s - recent cache exists (age %.1fs)", address, age / 1000)
            return True
        return False

    async def get_cached_wallet_data(self, address: str) -> WalletSnapshot | None:
        snapshot = await self.load(address)
        if snapshot is None:
            return None
        return snapshot if self._age_ms(snapshot) < READ_FRESHNESS_MS else None

    async def store(self, address: str, snapshot: WalletSnapshot) -> bool:
        """Persist ``snapshot``. Returns False when there is no storage facility."""
        if self._storage is None:
            return False
        await self._storage.set_item(cache_key(address), snapshot.to_json())
        logger.info(
            "Wallet data cached for %s: %d tokens, balance %s",
            address, len(snapshot.tokens), snapshot.balance,
        )
        return True
