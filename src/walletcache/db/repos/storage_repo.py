from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from walletcache.db.models.storage_item import StorageItem


class StorageRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_item(self, key: str) -> Optional[str]:
        result = await self._session.execute(
            select(StorageItem.value).where(StorageItem.key == key)
        )
        return result.scalar_one_or_none()

    async def set_item(self, key: str, value: str) -> StorageItem:
        """Insert or overwrite ``key``."""
        item = await self._session.get(StorageItem, key)
        if item is None:
            item = StorageItem(key=key, value=value)
            self._session.add(item)
        else:
            item.value = value
        await self._session.flush()
        return item

    async def remove_item(self, key: str) -> None:
        await self._session.execute(delete(StorageItem).where(StorageItem.key == key))
        await self._session.flush()
