"""Tests for SolanaRPCClient — JSON-RPC communication."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from walletcache.exceptions import ExternalServiceError
from walletcache.infra.blockchain.solana.constants import TOKEN_2022_PROGRAM_ID, TOKEN_PROGRAM_ID
from walletcache.infra.blockchain.solana.rpc_client import SolanaRPCClient

OWNER = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"


@pytest.fixture()
def mock_http():
    return AsyncMock()


@pytest.fixture()
def rpc(mock_http):
    return SolanaRPCClient(rpc_url="https://api.mainnet-beta.solana.com", http_client=mock_http)


def _mock_response(data: dict, status_code: int = 200):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = data
    return resp


def _payload(mock_http) -> dict:
    call_args = mock_http.post.call_args
    return call_args[1]["json"] if "json" in call_args[1] else call_args[0][1]


class TestGetBalance:
    async def test_returns_lamports(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({
            "jsonrpc": "2.0", "id": 1,
            "result": {"context": {"slot": 1}, "value": 2_500_000_000},
        })

        assert await rpc.get_balance(OWNER) == 2_500_000_000
        payload = _payload(mock_http)
        assert payload["method"] == "getBalance"
        assert payload["params"] == [OWNER]

    async def test_missing_value_is_malformed(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({"jsonrpc": "2.0", "id": 1, "result": 42})

        with pytest.raises(ExternalServiceError, match="malformed"):
            await rpc.get_balance(OWNER)


class TestTokenAccounts:
    async def test_parsed_listing_requests_json_parsed(self, rpc, mock_http):
        accounts = [{"pubkey": "acc1", "account": {"data": {"parsed": {"info": {"mint": "M1"}}}}}]
        mock_http.post.return_value = _mock_response({
            "jsonrpc": "2.0", "id": 1, "result": {"context": {"slot": 1}, "value": accounts},
        })

        result = await rpc.get_parsed_token_accounts_by_owner(OWNER, TOKEN_PROGRAM_ID)
        assert result == accounts
        params = _payload(mock_http)["params"]
        assert params[0] == OWNER
        assert params[1] == {"programId": TOKEN_PROGRAM_ID}
        assert params[2] == {"encoding": "jsonParsed"}

    async def test_raw_listing_requests_base64(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({
            "jsonrpc": "2.0", "id": 1, "result": {"context": {"slot": 1}, "value": []},
        })

        result = await rpc.get_token_accounts_by_owner(OWNER, TOKEN_2022_PROGRAM_ID)
        assert result == []
        params = _payload(mock_http)["params"]
        assert params[1] == {"programId": TOKEN_2022_PROGRAM_ID}
        assert params[2] == {"encoding": "base64"}


class TestGetAccountInfo:
    async def test_missing_account_returns_none(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({
            "jsonrpc": "2.0", "id": 1, "result": {"context": {"slot": 1}, "value": None},
        })

        assert await rpc.get_account_info("missing") is None

    async def test_returns_account(self, rpc, mock_http):
        account = {"data": ["AAAA", "base64"], "owner": TOKEN_PROGRAM_ID, "lamports": 2039280}
        mock_http.post.return_value = _mock_response({
            "jsonrpc": "2.0", "id": 1, "result": {"context": {"slot": 1}, "value": account},
        })

        assert await rpc.get_account_info("acc1") == account


class TestRPCErrors:
    async def test_rpc_error_raises_without_retry(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({
            "jsonrpc": "2.0", "id": 1,
            "error": {"code": -32602, "message": "Invalid param: WrongSize"},
        })

        with pytest.raises(ExternalServiceError, match="WrongSize"):
            await rpc.get_balance("bad")
        assert mock_http.post.call_count == 1

    async def test_http_error_raises(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({}, status_code=429)

        with pytest.raises(ExternalServiceError, match="429"):
            await rpc.get_balance(OWNER)
