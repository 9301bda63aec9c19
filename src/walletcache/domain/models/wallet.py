"""Wallet holdings records: per-account token amounts and the cached snapshot."""

from typing import Optional

from pydantic import BaseModel, Field


class TokenAmount(BaseModel):
    """Raw on-chain amount plus its UI-scaled form. ``ui_amount == int(amount) / 10**decimals``."""

    amount: str  # string keeps u64 precision
    decimals: int
    ui_amount: float = Field(alias="uiAmount")
    ui_amount_string: str = Field(alias="uiAmountString")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_raw(cls, amount: int, decimals: int) -> "TokenAmount":
        ui_amount = amount / 10**decimals
        return cls(
            amount=str(amount),
            decimals=decimals,
            ui_amount=ui_amount,
            ui_amount_string=str(ui_amount),
        )

    @classmethod
    def from_parsed(cls, data: dict) -> "TokenAmount":
        """Build from a jsonParsed ``tokenAmount`` object. ``uiAmount`` may be null on some nodes."""
        amount = str(data["amount"])
        decimals = int(data["decimals"])
        ui_amount = data.get("uiAmount")
        if ui_amount is None:
            ui_amount = int(amount) / 10**decimals
        ui_amount_string = data.get("uiAmountString") or str(ui_amount)
        return cls(
            amount=amount,
            decimals=decimals,
            ui_amount=float(ui_amount),
            ui_amount_string=ui_amount_string,
        )


class TokenAccountInfo(BaseModel):
    """One on-chain token account, before mints are deduplicated."""

    mint: str
    token_amount: TokenAmount = Field(alias="tokenAmount")

    model_config = {"populate_by_name": True}


class TokenHolding(BaseModel):
    """A distinct mint held by the wallet, with display metadata and price."""

    mint: str
    balance: float
    decimals: int
    symbol: Optional[str] = None
    name: Optional[str] = None
    logo_uri: Optional[str] = Field(default=None, alias="logoURI")
    price: Optional[float] = None

    model_config = {"populate_by_name": True}


class WalletSnapshot(BaseModel):
    """Native balance + token holdings captured at ``timestamp`` (epoch milliseconds)."""

    balance: float
    tokens: list[TokenHolding] = []
    timestamp: int

    model_config = {"populate_by_name": True}

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
