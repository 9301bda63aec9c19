from walletcache.domain.enums.prefetch import PrefetchStatus

__all__ = ["PrefetchStatus"]
