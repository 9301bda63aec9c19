"""Tests for MetaplexMetadataProvider — PDA derivation, account parsing, off-chain image."""

import base64
import struct
from unittest.mock import AsyncMock, MagicMock

import pytest
from solders.pubkey import Pubkey

from walletcache.exceptions import AccountDecodeError
from walletcache.infra.blockchain.solana.rpc_client import SolanaRPCClient
from walletcache.infra.metadata.metaplex import MetaplexMetadataProvider, find_metadata_pda, parse_metadata_account

USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


def _borsh_str(value: str, width: int) -> bytes:
    encoded = value.encode().ljust(width, b"\x00")
    return struct.pack("<I", len(encoded)) + encoded


def metadata_bytes(name: str, symbol: str, uri: str) -> bytes:
    head = bytes([4]) + bytes(Pubkey.new_unique()) + bytes(Pubkey.new_unique())
    return head + _borsh_str(name, 32) + _borsh_str(symbol, 10) + _borsh_str(uri, 200) + b"\x00" * 40


def metadata_account(name: str, symbol: str, uri: str) -> dict:
    raw = metadata_bytes(name, symbol, uri)
    return {"data": [base64.b64encode(raw).decode(), "base64"], "owner": "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"}


def _json_response(body, status_code: int = 200):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = body
    return resp


@pytest.fixture()
def rpc():
    return AsyncMock(spec=SolanaRPCClient)


@pytest.fixture()
def http():
    mock = MagicMock()
    mock.get = AsyncMock()
    return mock


class TestParseMetadataAccount:
    def test_strips_padding(self):
        parsed = parse_metadata_account(metadata_bytes("USD Coin", "USDC", "https://example.com/usdc.json"))
        assert parsed.name == "USD Coin"
        assert parsed.symbol == "USDC"
        assert parsed.uri == "https://example.com/usdc.json"

    def test_truncated_raises(self):
        with pytest.raises(AccountDecodeError):
            parse_metadata_account(metadata_bytes("USD Coin", "USDC", "x")[:80])


class TestFindMetadataPda:
    def test_deterministic_and_off_curve(self):
        pda = find_metadata_pda(USDC_MINT)
        assert pda == find_metadata_pda(USDC_MINT)
        assert not Pubkey.from_string(pda).is_on_curve()

    def test_invalid_mint_raises(self):
        with pytest.raises(ValueError):
            find_metadata_pda("M1")


class TestLookup:
    async def test_resolves_with_image(self, rpc, http):
        rpc.get_account_info.return_value = metadata_account("USD Coin", "USDC", "https://example.com/usdc.json")
        http.get.return_value = _json_response({"name": "USD Coin", "image": "https://example.com/usdc.png"})

        result = await MetaplexMetadataProvider(rpc, http).lookup(USDC_MINT)
        assert result is not None
        assert result.symbol == "USDC"
        assert result.name == "USD Coin"
        assert result.logo_uri == "https://example.com/usdc.png"
        rpc.get_account_info.assert_awaited_once_with(find_metadata_pda(USDC_MINT))

    async def test_json_failure_keeps_name_and_symbol(self, rpc, http):
        rpc.get_account_info.return_value = metadata_account("USD Coin", "USDC", "https://example.com/usdc.json")
        http.get.side_effect = RuntimeError("connection reset")

        result = await MetaplexMetadataProvider(rpc, http).lookup(USDC_MINT)
        assert result is not None
        assert result.logo_uri == ""

    async def test_non_string_image_keeps_name_and_symbol(self, rpc, http):
        rpc.get_account_info.return_value = metadata_account("USD Coin", "USDC", "https://example.com/usdc.json")
        http.get.return_value = _json_response({"name": "USD Coin", "image": {"uri": "a.png"}})

        result = await MetaplexMetadataProvider(rpc, http).lookup(USDC_MINT)
        assert result is not None
        assert result.symbol == "USDC"
        assert result.name == "USD Coin"
        assert result.logo_uri == ""

    async def test_empty_uri_skips_json(self, rpc, http):
        rpc.get_account_info.return_value = metadata_account("USD Coin", "USDC", "")

        result = await MetaplexMetadataProvider(rpc, http).lookup(USDC_MINT)
        assert result.logo_uri == ""
        http.get.assert_not_called()

    async def test_missing_symbol_is_unresolved(self, rpc, http):
        rpc.get_account_info.return_value = metadata_account("Nameless", "", "")

        assert await MetaplexMetadataProvider(rpc, http).lookup(USDC_MINT) is None

    async def test_no_metadata_account_raises(self, rpc, http):
        rpc.get_account_info.return_value = None

        with pytest.raises(AccountDecodeError):
            await MetaplexMetadataProvider(rpc, http).lookup(USDC_MINT)
