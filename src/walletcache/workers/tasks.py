"""Celery tasks for background processing."""

import asyncio
import logging

from walletcache.workers.celery_app import celery_app

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, name="prefetch_wallet")
def prefetch_wallet_task(self, address: str) -> dict:
    """Warm the wallet cache for ``address``.

    Bridges to async code via asyncio.run(); each task invocation
    creates its own engine + session.
    """
    return asyncio.run(_prefetch_wallet_async(address))


async def _prefetch_wallet_async(address: str) -> dict:
    from walletcache.config import settings
    from walletcache.db.session import build_engine, build_session_factory, init_models
    from walletcache.infra.http.rate_limited_client import RateLimitedClient
    from walletcache.services.wallet_prefetch import build_wallet_aggregator
    from walletcache.storage.local_storage import LocalStorage

    engine = build_engine(settings.database_url, echo=False)
    try:
        await init_models(engine)
        storage = LocalStorage(build_session_factory(engine))
        async with RateLimitedClient(
            rate_per_second=settings.http_rate_per_second, timeout=settings.http_timeout
        ) as http_client:
            aggregator = build_wallet_aggregator(http_client, storage, settings)
            result = await aggregator.prefetch(address)
    finally:
        await engine.dispose()

    logger.info("Prefetch for %s finished: %s", address, result.status.value)
    return {"status": result.status.value, "error": result.error}
