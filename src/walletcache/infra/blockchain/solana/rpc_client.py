"""Solana JSON-RPC client — balances, token accounts and raw account data."""

import logging

from walletcache.exceptions import ExternalServiceError
from walletcache.infra.http.rate_limited_client import RateLimitedClient

logger = logging.getLogger(__name__)


class SolanaRPCClient:
    """Minimal Solana JSON-RPC client for wallet holdings."""

    def __init__(self, rpc_url: str, http_client: RateLimitedClient) -> None:
        self._rpc_url = rpc_url
        self._http = http_client

    async def _call(self, method: str, params: list) -> dict | list | int | str | None:
        """Execute a JSON-RPC call and return the result field."""
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": method,
            "params": params,
        }
        resp = await self._http.post(self._rpc_url, json=payload)
        if resp.status_code != 200:
            raise ExternalServiceError(f"Solana RPC HTTP {resp.status_code} ({method})")
        data = resp.json()

        if "error" in data:
            error = data["error"]
            msg = error.get("message", str(error))
            raise ExternalServiceError(f"Solana RPC error ({method}): {msg}")

        return data.get("result")

    @staticmethod
    def _value(result: dict | list | int | str | None, method: str):
        """Unwrap the ``{context, value}`` envelope most account methods return."""
        if not isinstance(result, dict) or "value" not in result:
            raise ExternalServiceError(f"Solana RPC malformed response ({method})")
        return result["value"]

    async def get_balance(self, address: str) -> int:
        """Native balance in lamports."""
        result = await self._call("getBalance", [address])
        return int(self._value(result, "getBalance"))

    async def get_parsed_token_accounts_by_owner(self, owner: str, program_id: str) -> list[dict]:
        """Token accounts owned by ``owner`` under ``program_id``, jsonParsed by the node.

        Each item is ``{pubkey, account: {data: {parsed: {info: {mint, tokenAmount, ...}}}, ...}}``.
        """
        result = await self._call(
            "getTokenAccountsByOwner",
            [owner, {"programId": program_id}, {"encoding": "jsonParsed"}],
        )
        return list(self._value(result, "getTokenAccountsByOwner") or [])

    async def get_token_accounts_by_owner(self, owner: str, program_id: str) -> list[dict]:
        """Same listing with base64 account data; callers decode it themselves."""
        result = await self._call(
            "getTokenAccountsByOwner",
            [owner, {"programId": program_id}, {"encoding": "base64"}],
        )
        return list(self._value(result, "getTokenAccountsByOwner") or [])

    async def get_account_info(self, pubkey: str) -> dict | None:
        """Raw account ``{data: [b64, "base64"], owner, lamports, ...}`` or None if missing."""
        result = await self._call("getAccountInfo", [pubkey, {"encoding": "base64"}])
        return self._value(result, "getAccountInfo")
