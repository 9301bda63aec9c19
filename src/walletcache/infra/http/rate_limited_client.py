import asyncio
import time

import httpx


class RateLimitedClient:
    """Async HTTP client shared by the RPC, metadata and price lookups.

    ``rate_per_second <= 0`` disables the interval throttle; calls are then
    only bounded by whatever the remote side enforces.
    """

    def __init__(self, rate_per_second: float = 0.0, timeout: float = 30.0) -> None:
        self._min_interval = 1.0 / rate_per_second if rate_per_second > 0 else 0.0
        self._last_request_time = 0.0
        self._lock = asyncio.Lock()
        self._client = httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def _wait_for_slot(self) -> None:
        if self._min_interval <= 0:
            return
        async with self._lock:
            now = time.monotonic()
            elapsed = now - self._last_request_time
            if elapsed < self._min_interval:
                await asyncio.sleep(self._min_interval - elapsed)
            self._last_request_time = time.monotonic()

    async def get(self, url: str, params: dict | None = None, headers: dict | None = None) -> httpx.Response:
        await self._wait_for_slot()
        return await self._client.get(url, params=params, headers=headers)

    async def post(self, url: str, json: dict | list | None = None) -> httpx.Response:
        await self._wait_for_slot()
        return await self._client.post(url, json=json)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RateLimitedClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
