"""Display metadata for a token mint."""

from pydantic import BaseModel

UNKNOWN_SYMBOL = "UNKNOWN"
UNKNOWN_NAME = "Unknown Token"


class TokenMetadata(BaseModel):
    """Resolved symbol/name/logo for a mint. An unresolved lookup is represented by ``None``."""

    symbol: str
    name: str
    logo_uri: str = ""

    model_config = {"frozen": True}


PLACEHOLDER_METADATA = TokenMetadata(symbol=UNKNOWN_SYMBOL, name=UNKNOWN_NAME, logo_uri="")
