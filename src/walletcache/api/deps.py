from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from walletcache.container import Container
from walletcache.services.wallet_cache import WalletCache
from walletcache.storage.local_storage import LocalStorage


@inject
async def get_storage(
    storage: LocalStorage = Depends(Provide[Container.storage]),
) -> LocalStorage:
    return storage


async def get_wallet_cache(storage: LocalStorage = Depends(get_storage)) -> WalletCache:
    return WalletCache(storage)
