"""Token metadata from the Metaplex Token Metadata program (on-chain name/symbol, off-chain image)."""

import base64
import logging
import struct
from dataclasses import dataclass

from solders.pubkey import Pubkey

from walletcache.domain.models.metadata import TokenMetadata
from walletcache.exceptions import AccountDecodeError
from walletcache.infra.blockchain.solana.constants import METADATA_PROGRAM_ID
from walletcache.infra.blockchain.solana.rpc_client import SolanaRPCClient
from walletcache.infra.http.rate_limited_client import RateLimitedClient

logger = logging.getLogger(__name__)

# key (u8) + update_authority + mint
_DATA_OFFSET = 1 + 32 + 32


@dataclass(frozen=True)
class OnChainMetadata:
    name: str
    symbol: str
    uri: str


def find_metadata_pda(mint: str) -> str:
    program_id = Pubkey.from_string(METADATA_PROGRAM_ID)
    pda, _ = Pubkey.find_program_address(
        [b"metadata", bytes(program_id), bytes(Pubkey.from_string(mint))],
        program_id,
    )
    return str(pda)


def _read_string(raw: bytes, offset: int) -> tuple[str, int]:
    if offset + 4 > len(raw):
        raise AccountDecodeError("Metadata account truncated")
    (length,) = struct.unpack_from("<I", raw, offset)
    start = offset + 4
    end = start + length
    if end > len(raw):
        raise AccountDecodeError("Metadata string overruns account data")
    # Fixed-width fields are right-padded with NULs
    value = raw[start:end].decode("utf-8", errors="replace").rstrip("\x00").strip()
    return value, end


def parse_metadata_account(raw: bytes) -> OnChainMetadata:
    name, offset = _read_string(raw, _DATA_OFFSET)
    symbol, offset = _read_string(raw, offset)
    uri, _ = _read_string(raw, offset)
    return OnChainMetadata(name=name, symbol=symbol, uri=uri)


class MetaplexMetadataProvider:
    """Marketplace metadata lookup by mint."""

    def __init__(self, rpc: SolanaRPCClient, http_client: RateLimitedClient) -> None:
        self._rpc = rpc
        self._http = http_client

    async def find_by_mint(self, mint: str) -> OnChainMetadata:
        """Load and parse the metadata account. Raises if it does not exist."""
        pda = find_metadata_pda(mint)
        account = await self._rpc.get_account_info(pda)
        if account is None:
            raise AccountDecodeError(f"No metadata account for mint {mint}")
        data = account.get("data") or []
        raw = base64.b64decode(data[0]) if data else b""
        return parse_metadata_account(raw)

    async def _load_image(self, uri: str) -> str:
        """Image URL from the off-chain JSON; empty when the JSON cannot be loaded."""
        if not uri:
            return ""
        try:
            response = await self._http.get(uri)
            if response.status_code != 200:
                return ""
            body = response.json()
        except Exception as e:
            logger.debug("Metadata JSON load failed for %s: %s", uri, e)
            return ""
        if not isinstance(body, dict):
            return ""
        image = body.get("image")
        return image if isinstance(image, str) else ""

    async def lookup(self, mint: str) -> TokenMetadata | None:
        metadata = await self.find_by_mint(mint)
        if not metadata.name or not metadata.symbol:
            return None
        logo = await self._load_image(metadata.uri)
        return TokenMetadata(symbol=metadata.symbol, name=metadata.name, logo_uri=logo)
