class WalletCacheError(Exception):
    """Base error for the wallet cache package."""


class ExternalServiceError(WalletCacheError):
    """A remote service (RPC node, metadata or price API) returned an error."""


class AccountDecodeError(WalletCacheError):
    """On-chain account data could not be decoded as the expected SPL layout."""
