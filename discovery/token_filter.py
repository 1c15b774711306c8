"""
Token Filter
=============
Screening logic for discovered tokens and their pairs.

Two filters, both pure:
- filter_by_chain: keep only entries tagged for one chain (Solana by default)
- PairFilter: keep only pairs with real activity behind them

A pair is "promising" when it has ALL of:
- more than $50K traded in the last 24h
- more than +5% price change over 24h
- more than $10K of liquidity in the pool

The thresholds are fixed on purpose and are not read from settings.
"""

from typing import Iterable, TypeVar

from discovery.models import TradingPair
from utils.logger import get_logger

logger = get_logger(__name__)

SOLANA_CHAIN_ID = "solana"

MIN_VOLUME_24H_USD = 50_000
MIN_PRICE_CHANGE_24H_PCT = 5
MIN_LIQUIDITY_USD = 10_000

T = TypeVar("T")


def filter_by_chain(items: Iterable[T], chain_id: str = SOLANA_CHAIN_ID) -> list[T]:
    """
    Keep the items whose chain_id is exactly chain_id (case-sensitive).
    Works on anything with a chain_id attribute: profiles and pairs alike.
    """
    return [item for item in items if getattr(item, "chain_id", None) == chain_id]


class PairFilter:
    """
    Applies the activity thresholds to trading pairs.

    Usage:
        pf = PairFilter()
        promising = pf.apply_filters(pairs)
    """

    def apply_filters(self, pairs: list[TradingPair]) -> list[TradingPair]:
        """
        Run every check on a list of pairs.
        Returns only pairs that pass all of them, in their original order.
        """
        results = []
        for pair in pairs:
            issues = self.check_pair(pair)
            if not issues:
                results.append(pair)
            else:
                logger.debug(
                    "pair_filtered_out",
                    symbol=pair.symbol,
                    pair_address=pair.pair_address,
                    issues=issues,
                )
        return results

    def check_pair(self, pair: TradingPair) -> list[str]:
        """
        Check a single pair.
        Returns a list of problems found (empty = passed all checks).
        """
        issues = []

        if not pair.volume_h24 > MIN_VOLUME_24H_USD:
            issues.append(f"Low 24h volume: ${pair.volume_h24:,.0f}")

        if not pair.price_change_h24 > MIN_PRICE_CHANGE_24H_PCT:
            issues.append(f"Weak 24h price change: {pair.price_change_h24:.2f}%")

        if not pair.liquidity_usd > MIN_LIQUIDITY_USD:
            issues.append(f"Thin liquidity: ${pair.liquidity_usd:,.0f}")

        return issues
