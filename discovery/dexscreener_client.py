"""
DexScreener Client
==================
Client for the public DexScreener API. Free, no API key.

Two endpoints are used:
- /token-profiles/latest/v1   the newest token profiles, across all chains
- /latest/dex/search?q=...    trading pairs matching a query (we pass a mint address)

Failure policy: nothing here raises for API trouble. A network error, a
non-2xx status, malformed JSON or an unexpected payload shape all come back
as a FetchResult with error set. The caller decides what to do with it.

API docs: https://docs.dexscreener.com/api/reference
"""

import asyncio
from typing import Any

import aiohttp

from discovery.models import FetchResult, TokenProfile, TradingPair
from discovery.token_filter import SOLANA_CHAIN_ID, filter_by_chain
from utils.logger import get_logger

logger = get_logger(__name__)

TOKEN_PROFILES_ENDPOINT = "/token-profiles/latest/v1"
SEARCH_ENDPOINT = "/latest/dex/search"


class DexScreenerError(Exception):
    """DexScreener answered, but not with something we can use."""

    def __init__(self, message: str, status: int | None = None, endpoint: str = ""):
        super().__init__(message)
        self.status = status
        self.endpoint = endpoint


class DexScreenerClient:
    """
    Client for the DexScreener API.

    Usage:
        client = DexScreenerClient(session)
        profiles = (await client.fetch_token_profiles()).or_empty()
        pairs = (await client.search_pairs(mint_address)).or_empty()
    """

    BASE_URL = "https://api.dexscreener.com"

    def __init__(self, session: aiohttp.ClientSession, base_url: str | None = None, chain_id: str = SOLANA_CHAIN_ID):
        self.session = session
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.chain_id = chain_id

    async def _get(self, endpoint: str, params: dict | None = None) -> Any:
        """Make a GET request and return the decoded JSON body. Raises on non-2xx."""
        url = f"{self.base_url}{endpoint}"
        logger.debug("dexscreener_request", url=url, params=params)
        async with self.session.get(url, params=params) as response:
            if not 200 <= response.status < 300:
                raise DexScreenerError(
                    f"HTTP {response.status} {response.reason or ''}".strip(),
                    status=response.status,
                    endpoint=endpoint,
                )
            return await response.json(content_type=None)

    async def fetch_token_profiles(self) -> FetchResult:
        """
        Get the latest token profiles (all chains, in the order DexScreener returns them).
        Elements that aren't JSON objects are skipped.
        """
        try:
            data = await self._get(TOKEN_PROFILES_ENDPOINT)
            if not isinstance(data, list):
                raise DexScreenerError(
                    f"Expected a list of profiles, got {type(data).__name__}",
                    endpoint=TOKEN_PROFILES_ENDPOINT,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, DexScreenerError) as e:
            return FetchResult.failure(f"Error fetching token profiles: {_describe(e)}")

        profiles = [TokenProfile.from_api(item) for item in data if isinstance(item, dict)]
        logger.info("token_profiles_fetched", count=len(profiles))
        return FetchResult(items=profiles)

    async def search_pairs(self, token_address: str) -> FetchResult:
        """
        Get the trading pairs for a token on our chain.

        A response without a "pairs" field is a normal "nothing found",
        not an error.
        """
        try:
            data = await self._get(SEARCH_ENDPOINT, params={"q": token_address})
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, DexScreenerError) as e:
            return FetchResult.failure(f"Error searching for token address {token_address}: {_describe(e)}")

        raw_pairs = data.get("pairs") if isinstance(data, dict) else None
        if not raw_pairs:
            return FetchResult(items=[])

        pairs = [TradingPair.from_api(p) for p in raw_pairs if isinstance(p, dict)]
        return FetchResult(items=filter_by_chain(pairs, self.chain_id))


def _describe(error: BaseException) -> str:
    """Readable one-liner for an exception (TimeoutError has an empty str())."""
    return str(error) or type(error).__name__
