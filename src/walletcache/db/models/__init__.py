from walletcache.db.models.storage_item import StorageItem

__all__ = ["StorageItem"]
