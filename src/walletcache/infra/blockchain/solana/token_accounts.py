"""Token account retrieval for a wallet across the SPL Token and Token-2022 programs.

Per program id: the jsonParsed listing is tried first; when it returns no
accounts, the base64 listing is walked and every account (and its mint) is
fetched and decoded individually.
"""

import logging
from collections.abc import Iterable

from walletcache.domain.models.wallet import TokenAccountInfo, TokenAmount
from walletcache.infra.blockchain.solana.constants import TOKEN_PROGRAM_IDS
from walletcache.infra.blockchain.solana.rpc_client import SolanaRPCClient
from walletcache.infra.blockchain.solana.spl_token import get_account, get_mint

logger = logging.getLogger(__name__)


def dedupe_by_mint(infos: Iterable[TokenAccountInfo]) -> list[TokenAccountInfo]:
    """Keep the first account seen for each mint, preserving order."""
    seen: set[str] = set()
    result: list[TokenAccountInfo] = []
    for info in infos:
        if info.mint in seen:
            continue
        seen.add(info.mint)
        result.append(info)
    return result


class TokenAccountFetcher:
    def __init__(self, rpc: SolanaRPCClient) -> None:
        self._rpc = rpc

    async def fetch_parsed(self, owner: str, program_id: str) -> list[TokenAccountInfo]:
        """Structured listing. Raises on RPC failure or an unexpected response shape."""
        accounts = await self._rpc.get_parsed_token_accounts_by_owner(owner, program_id)
        infos: list[TokenAccountInfo] = []
        for acc in accounts:
            info = acc["account"]["data"]["parsed"]["info"]
            infos.append(TokenAccountInfo(
                mint=info["mint"],
                token_amount=TokenAmount.from_parsed(info["tokenAmount"]),
            ))
        return infos

    async def fetch_raw(self, owner: str, program_id: str) -> list[TokenAccountInfo]:
        """Raw listing. Zero-balance accounts and accounts that fail to decode are skipped."""
        accounts = await self._rpc.get_token_accounts_by_owner(owner, program_id)
        infos: list[TokenAccountInfo] = []
        for acc in accounts:
            pubkey = acc.get("pubkey", "")
            try:
                state = await get_account(self._rpc, pubkey, program_id)
                if state.amount <= 0:
                    continue
                mint = await get_mint(self._rpc, state.mint, program_id)
                infos.append(TokenAccountInfo(
                    mint=state.mint,
                    token_amount=TokenAmount.from_raw(state.amount, mint.decimals),
                ))
            except Exception as e:
                logger.debug("Skipping token account %s (%s): %s", pubkey, program_id, e)
                continue
        return infos

    async def fetch_for_program(self, owner: str, program_id: str) -> list[TokenAccountInfo]:
        parsed = await self.fetch_parsed(owner, program_id)
        if parsed:
            return parsed
        return await self.fetch_raw(owner, program_id)

    async def fetch_all(
        self, owner: str, program_ids: Iterable[str] = TOKEN_PROGRAM_IDS
    ) -> list[TokenAccountInfo]:
        """Combined accounts for every program id; a failing program id contributes nothing."""
        infos: list[TokenAccountInfo] = []
        for program_id in program_ids:
            try:
                infos.extend(await self.fetch_for_program(owner, program_id))
            except Exception as e:
                logger.debug("Token account listing failed for %s under %s: %s", owner, program_id, e)
                continue
        return infos
