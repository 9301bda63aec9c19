from walletcache.domain.models.metadata import PLACEHOLDER_METADATA, TokenMetadata
from walletcache.domain.models.wallet import TokenAccountInfo, TokenAmount, TokenHolding, WalletSnapshot

__all__ = [
    "PLACEHOLDER_METADATA",
    "TokenAccountInfo",
    "TokenAmount",
    "TokenHolding",
    "TokenMetadata",
    "WalletSnapshot",
]
