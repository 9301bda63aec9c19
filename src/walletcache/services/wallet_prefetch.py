"""WalletAggregator — builds a wallet holdings snapshot and writes it to the cache.

Pipeline: freshness gate -> native balance -> token accounts (both token
programs) -> dedup by mint -> metadata per mint -> prices per mint (plus
wrapped SOL) -> cache write. Prefetching is a best-effort warm-up, so the
public entry points never raise.
"""

import logging

from pydantic import BaseModel
from solders.pubkey import Pubkey

from walletcache.config import Settings, settings as default_settings
from walletcache.domain.enums import PrefetchStatus
from walletcache.domain.models.wallet import TokenHolding, WalletSnapshot
from walletcache.infra.blockchain.solana.constants import LAMPORTS_PER_SOL, WRAPPED_SOL_MINT
from walletcache.infra.blockchain.solana.rpc_client import SolanaRPCClient
from walletcache.infra.blockchain.solana.token_accounts import TokenAccountFetcher, dedupe_by_mint
from walletcache.infra.http.rate_limited_client import RateLimitedClient
from walletcache.infra.metadata.birdeye import BirdeyeMetadataProvider
from walletcache.infra.metadata.curated import CuratedAssetRegistry
from walletcache.infra.metadata.metaplex import MetaplexMetadataProvider
from walletcache.infra.metadata.resolver import TokenMetadataResolver
from walletcache.infra.price.service import TokenPriceService
from walletcache.infra.price.token_data import TokenDataProvider
from walletcache.services.wallet_cache import Clock, WalletCache, now_ms
from walletcache.storage.local_storage import KeyValueStore

logger = logging.getLogger(__name__)


class PrefetchResult(BaseModel):
    status: PrefetchStatus
    snapshot: WalletSnapshot | None = None
    error: str | None = None


class WalletAggregator:
    def __init__(
        self,
        rpc: SolanaRPCClient | None,
        metadata: TokenMetadataResolver,
        prices: TokenPriceService,
        cache: WalletCache,
    ) -> None:
        self._rpc = rpc
        self._accounts = TokenAccountFetcher(rpc) if rpc is not None else None
        self._metadata = metadata
        self._prices = prices
        self._cache = cache

    async def prefetch(self, address: str) -> PrefetchResult:
        """Run the prefetch; every failure comes back as a FAILED result."""
        try:
            return await self._prefetch(address)
        except Exception as e:
            logger.exception("Wallet prefetch failed for %s", address)
            return PrefetchResult(status=PrefetchStatus.FAILED, error=str(e))

    async def prefetch_wallet_data(self, address: str) -> None:
        await self.prefetch(address)

    async def get_cached_wallet_data(self, address: str) -> WalletSnapshot | None:
        return await self._cache.get_cached_wallet_data(address)

    async def _prefetch(self, address: str) -> PrefetchResult:
        if not self._cache.available:
            return PrefetchResult(status=PrefetchStatus.NO_STORAGE)

        if await self._cache.is_fresh(address):
            return PrefetchResult(status=PrefetchStatus.SKIPPED_FRESH)

        if self._rpc is None:
            return PrefetchResult(status=PrefetchStatus.NOT_CONFIGURED)

        logger.info("No recent cache for %s, prefetching", address)
        snapshot = await self.fetch_snapshot(address)
        await self._cache.store(address, snapshot)
        return PrefetchResult(status=PrefetchStatus.CACHED, snapshot=snapshot)

    async def fetch_snapshot(self, address: str) -> WalletSnapshot:
        """Fetch and assemble a snapshot without touching the cache."""
        if self._rpc is None or self._accounts is None:
            raise RuntimeError("Solana RPC URL is not configured")

        owner = str(Pubkey.from_string(address))

        lamports = await self._rpc.get_balance(owner)
        balance = lamports / LAMPORTS_PER_SOL

        infos = dedupe_by_mint(await self._accounts.fetch_all(owner))

        holdings: list[TokenHolding] = []
        for info in infos:
            metadata = await self._metadata.resolve(info.mint)
            holdings.append(TokenHolding(
                mint=info.mint,
                balance=info.token_amount.ui_amount,
                decimals=info.token_amount.decimals,
                symbol=metadata.symbol,
                name=metadata.name,
                logo_uri=metadata.logo_uri,
            ))

        # Wrapped SOL is always priced so the native balance can be valued
        mints = [h.mint for h in holdings]
        if WRAPPED_SOL_MINT not in mints:
            mints.append(WRAPPED_SOL_MINT)
        prices = await self._prices.fetch_token_prices(mints)

        tokens = [h.model_copy(update={"price": prices.get(h.mint) or 0.0}) for h in holdings]
        return WalletSnapshot(balance=balance, tokens=tokens, timestamp=self._cache.now())


def build_wallet_aggregator(
    http_client: RateLimitedClient,
    storage: KeyValueStore | None,
    config: Settings = default_settings,
    curated: CuratedAssetRegistry | None = None,
    clock: Clock = now_ms,
) -> WalletAggregator:
    """Wire an aggregator from settings. Without an RPC URL the aggregator never fetches."""
    rpc = SolanaRPCClient(config.solana_rpc_url, http_client) if config.solana_rpc_url else None

    lookups = []
    if rpc is not None:
        lookups.append(MetaplexMetadataProvider(rpc, http_client).lookup)
    lookups.append(BirdeyeMetadataProvider(http_client, config.birdeye_proxy_url).lookup)
    if curated is None:
        curated = CuratedAssetRegistry.load(config.curated_assets_path)

    return WalletAggregator(
        rpc=rpc,
        metadata=TokenMetadataResolver(lookups, curated=curated),
        prices=TokenPriceService(TokenDataProvider(http_client, config.price_api_url)),
        cache=WalletCache(storage, clock=clock),
    )
