"""Prefetch one wallet into the cache and print what a reader would get back.

Usage:
    PYTHONPATH=src python scripts/prefetch_wallet.py <address>
"""

import asyncio
import logging
import sys

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


async def main(address: str) -> None:
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
        ) as http:
            aggregator = build_wallet_aggregator(http, storage, settings)
            result = await aggregator.prefetch(address)
            print(f"Prefetch: {result.status.value}" + (f" ({result.error})" if result.error else ""))

            snapshot = await aggregator.get_cached_wallet_data(address)
            if snapshot is None:
                print("No recent cached data")
            else:
                print(f"SOL balance: {snapshot.balance}")
                for token in snapshot.tokens:
                    print(f"  {token.symbol:<10} {token.balance:>20} @ {token.price}  {token.mint}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(sys.argv[1]))
