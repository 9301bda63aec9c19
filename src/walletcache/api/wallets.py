from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from walletcache.api.deps import get_wallet_cache
from walletcache.api.schemas.wallets import PrefetchQueuedResponse, TokenHoldingResponse, WalletCacheResponse
from walletcache.services.wallet_cache import WalletCache

router = APIRouter(prefix="/api/wallets", tags=["wallets"])

CacheDep = Annotated[WalletCache, Depends(get_wallet_cache)]


@router.get("/{address}/cache", response_model=WalletCacheResponse, response_model_by_alias=True)
async def get_cached_wallet(address: str, cache: CacheDep) -> WalletCacheResponse:
    """Cached holdings, if captured within the last 10 minutes."""
    snapshot = await cache.get_cached_wallet_data(address)
    if snapshot is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No recent cached data for wallet")
    return WalletCacheResponse(
        address=address,
        balance=snapshot.balance,
        tokens=[TokenHoldingResponse(**t.model_dump()) for t in snapshot.tokens],
        timestamp=snapshot.timestamp,
    )


@router.post("/{address}/prefetch", response_model=PrefetchQueuedResponse, status_code=status.HTTP_202_ACCEPTED)
async def trigger_prefetch(address: str) -> PrefetchQueuedResponse:
    """Enqueue a Celery task that warms the cache for this wallet."""
    from walletcache.workers.tasks import prefetch_wallet_task

    prefetch_wallet_task.delay(address)
    return PrefetchQueuedResponse(address=address)
