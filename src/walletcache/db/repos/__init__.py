from walletcache.db.repos.storage_repo import StorageRepo

__all__ = ["StorageRepo"]
