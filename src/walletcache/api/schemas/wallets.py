from typing import Optional

from pydantic import BaseModel, Field


class TokenHoldingResponse(BaseModel):
    mint: str
    balance: float
    decimals: int
    symbol: Optional[str] = None
    name: Optional[str] = None
    logo_uri: Optional[str] = Field(default=None, alias="logoURI")
    price: Optional[float] = None

    model_config = {"populate_by_name": True}


class WalletCacheResponse(BaseModel):
    address: str
    balance: float
    tokens: list[TokenHoldingResponse]
    timestamp: int


class PrefetchQueuedResponse(BaseModel):
    address: str
    status: str = "queued"
