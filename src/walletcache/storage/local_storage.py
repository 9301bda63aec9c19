"""Key-value storage facility used for the wallet cache."""

from typing import Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from walletcache.db.repos.storage_repo import StorageRepo


class KeyValueStore(Protocol):
    async def get_item(self, key: str) -> Optional[str]: ...

    async def set_item(self, key: str, value: str) -> None: ...


class LocalStorage:
    """SQL-backed ``KeyValueStore``. Each call uses its own session; writes commit immediately."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_item(self, key: str) -> Optional[str]:
        async with self._session_factory() as session:
            return await StorageRepo(session).get_item(key)

    async def set_item(self, key: str, value: str) -> None:
        async with self._session_factory() as session:
            await StorageRepo(session).set_item(key, value)
            await session.commit()

    async def remove_item(self, key: str) -> None:
        async with self._session_factory() as session:
            await StorageRepo(session).remove_item(key)
            await session.commit()
