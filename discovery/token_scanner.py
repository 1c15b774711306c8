"""
Token Scanner
=============
Finds promising Solana tokens on DexScreener.

Pipeline:
1. Pull the latest token profiles (all chains)
2. Keep the Solana ones
3. For each Solana token, search its trading pairs
4. Keep the pairs that pass PairFilter
5. Return every token that still has at least one pair

A failed API call never stops the run. If the profile fetch fails we
return nothing; if one token's search fails that token is simply skipped.

Lookups run one at a time by default (settings.scan_concurrency = 1).
Raising the limit overlaps the searches, but results still come back in
the order DexScreener listed the profiles.
"""

import asyncio

import aiohttp

from config.settings import Settings
from discovery.dexscreener_client import DexScreenerClient
from discovery.models import AnalysisResult, TokenProfile
from discovery.token_filter import PairFilter, filter_by_chain
from utils.logger import get_logger

logger = get_logger(__name__)


class TokenScanner:
    """
    Main discovery engine.

    Usage:
        scanner = TokenScanner(settings)
        await scanner.initialize()
        results = await scanner.run_discovery()
        await scanner.close()
    """

    def __init__(self, settings: Settings, client: DexScreenerClient | None = None):
        self.settings = settings
        self.session: aiohttp.ClientSession | None = None
        self.client = client
        self.pair_filter = PairFilter()

    async def initialize(self) -> None:
        """Set up the HTTP session and API client."""
        timeout = aiohttp.ClientTimeout(total=self.settings.effective_request_timeout)
        self.session = aiohttp.ClientSession(timeout=timeout)
        self.client = DexScreenerClient(self.session, base_url=self.settings.dexscreener_base_url)
        logger.info("token_scanner_initialized", base_url=self.settings.dexscreener_base_url)

    async def close(self) -> None:
        """Clean up the HTTP session."""
        if self.session:
            await self.session.close()
            self.session = None

    async def run_discovery(self) -> list[AnalysisResult]:
        """
        Run the full pipeline.
        Returns tokens with at least one promising pair, in discovery order.
        """
        if self.client is None:
            raise RuntimeError("TokenScanner.initialize() must be called before run_discovery()")

        fetched = await self.client.fetch_token_profiles()
        if not fetched.ok:
            logger.error("token_profiles_fetch_failed", error=fetched.error)
        profiles = fetched.or_empty()

        solana_profiles = filter_by_chain(profiles)
        logger.info("solana_profiles_found", total=len(profiles), solana=len(solana_profiles))

        if self.settings.scan_concurrency > 1:
            analyzed = await self._analyze_concurrently(solana_profiles)
        else:
            analyzed = [await self._analyze_profile(profile) for profile in solana_profiles]

        results = [result for result in analyzed if result is not None]
        logger.info("discovery_complete", scanned=len(solana_profiles), promising=len(results))
        return results

    async def _analyze_concurrently(self, profiles: list[TokenProfile]) -> list[AnalysisResult | None]:
        """Search several tokens at once, capped by scan_concurrency. Keeps input order."""
        semaphore = asyncio.Semaphore(self.settings.scan_concurrency)

        async def bounded(profile: TokenProfile) -> AnalysisResult | None:
            async with semaphore:
                return await self._analyze_profile(profile)

        return list(await asyncio.gather(*(bounded(p) for p in profiles)))

    async def _analyze_profile(self, profile: TokenProfile) -> AnalysisResult | None:
        """Search one token's pairs and screen them. None if nothing qualifies."""
        searched = await self.client.search_pairs(profile.token_address)
        if not searched.ok:
            logger.error("pair_search_failed", token=profile.token_address, error=searched.error)
        pairs = searched.or_empty()

        promising = self.pair_filter.apply_filters(pairs)
        if not promising:
            return None

        logger.info("promising_token_found", token=profile.token_address, pairs=len(promising))
        return AnalysisResult(profile=profile, pairs=promising)
