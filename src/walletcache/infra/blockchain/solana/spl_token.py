"""Decode SPL Token / Token-2022 account and mint data fetched with base64 encoding.

Only the base layout shared by both programs is read; Token-2022 extension
bytes after the base layout are ignored.
"""

import base64
import struct
from dataclasses import dataclass

from solders.pubkey import Pubkey

from walletcache.exceptions import AccountDecodeError
from walletcache.infra.blockchain.solana.rpc_client import SolanaRPCClient

ACCOUNT_SIZE = 165
MINT_SIZE = 82

_MINT_DECIMALS_OFFSET = 44


@dataclass(frozen=True)
class TokenAccountState:
    address: str
    mint: str
    owner: str
    amount: int


@dataclass(frozen=True)
class MintState:
    address: str
    supply: int
    decimals: int


def _account_bytes(account: dict) -> bytes:
    data = account.get("data")
    if not isinstance(data, list) or len(data) < 1 or (len(data) > 1 and data[1] != "base64"):
        raise AccountDecodeError("Account data is not base64 encoded")
    try:
        return base64.b64decode(data[0])
    except (ValueError, TypeError) as e:
        raise AccountDecodeError(f"Invalid base64 account data: {e}") from e


def _check_owner(address: str, account: dict | None, program_id: str) -> dict:
    if account is None:
        raise AccountDecodeError(f"Account {address} not found")
    if account.get("owner") != program_id:
        raise AccountDecodeError(f"Account {address} is not owned by {program_id}")
    return account


def decode_token_account(address: str, account: dict) -> TokenAccountState:
    """Decode mint (0..32), owner (32..64) and amount (u64 LE at 64..72)."""
    raw = _account_bytes(account)
    if len(raw) < ACCOUNT_SIZE:
        raise AccountDecodeError(f"Token account {address} too short: {len(raw)} bytes")
    (amount,) = struct.unpack_from("<Q", raw, 64)
    return TokenAccountState(
        address=address,
        mint=str(Pubkey.from_bytes(raw[0:32])),
        owner=str(Pubkey.from_bytes(raw[32:64])),
        amount=amount,
    )


def decode_mint(address: str, account: dict) -> MintState:
    """Decode supply (u64 LE at 36..44) and decimals (u8 at 44)."""
    raw = _account_bytes(account)
    if len(raw) < MINT_SIZE:
        raise AccountDecodeError(f"Mint {address} too short: {len(raw)} bytes")
    (supply,) = struct.unpack_from("<Q", raw, 36)
    return MintState(address=address, supply=supply, decimals=raw[_MINT_DECIMALS_OFFSET])


async def get_account(rpc: SolanaRPCClient, address: str, program_id: str) -> TokenAccountState:
    account = _check_owner(address, await rpc.get_account_info(address), program_id)
    return decode_token_account(address, account)


async def get_mint(rpc: SolanaRPCClient, address: str, program_id: str) -> MintState:
    account = _check_owner(address, await rpc.get_account_info(address), program_id)
    return decode_mint(address, account)
