"""
Data Models
===========
Typed views over DexScreener JSON.

Raw API dicts are converted here, once, at the ingestion boundary.
Numeric fields go through parse_float so that everything downstream
can compare plain floats without worrying about missing or junk values.
"""

import math
from dataclasses import dataclass, field
from typing import Any


def parse_float(value: Any) -> float:
    """
    Parse a numeric API field, defaulting to 0.0.

    DexScreener sends some numbers as strings ("1.2345") and omits others
    entirely. Anything that isn't a finite number becomes 0.0.
    """
    if value is None or value == "":
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _text(value: Any) -> str:
    """A string API field as str. Missing stays empty; anything else is stringified."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _nested(data: dict, key: str, subkey: str) -> Any:
    """Read data[key][subkey], tolerating a missing or non-dict parent."""
    parent = data.get(key)
    if not isinstance(parent, dict):
        return None
    return parent.get(subkey)


@dataclass(frozen=True)
class TokenProfile:
    """One entry from /token-profiles/latest/v1."""

    chain_id: str
    token_address: str
    url: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "TokenProfile":
        return cls(
            chain_id=_text(data.get("chainId")),
            token_address=_text(data.get("tokenAddress")),
            url=_text(data.get("url")),
        )


@dataclass(frozen=True)
class TradingPair:
    """
    One market for a token, from /latest/dex/search.

    volume_h24, price_change_h24 and liquidity_usd are already coerced
    (missing = 0.0). symbol is None when the API didn't send one.
    """

    chain_id: str
    symbol: str | None
    price_usd: float
    volume_h24: float
    price_change_h24: float
    liquidity_usd: float
    pair_address: str = ""
    dex_id: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "TradingPair":
        return cls(
            chain_id=_text(data.get("chainId")),
            symbol=_text(_nested(data, "baseToken", "symbol")) or None,
            price_usd=parse_float(data.get("priceUsd")),
            volume_h24=parse_float(_nested(data, "volume", "h24")),
            price_change_h24=parse_float(_nested(data, "priceChange", "h24")),
            liquidity_usd=parse_float(_nested(data, "liquidity", "usd")),
            pair_address=_text(data.get("pairAddress")),
            dex_id=_text(data.get("dexId")),
        )


@dataclass
class AnalysisResult:
    """A token profile together with the pairs that passed screening."""

    profile: TokenProfile
    pairs: list[TradingPair]

    def __post_init__(self) -> None:
        if not self.pairs:
            raise ValueError("AnalysisResult needs at least one qualifying pair")


@dataclass
class FetchResult:
    """
    Outcome of a call that is allowed to fail.

    The client never raises for API problems; it returns a FetchResult
    with error set, and the caller decides how to recover (usually or_empty()).
    """

    items: list = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: str) -> "FetchResult":
        return cls(items=[], error=error)

    def or_empty(self) -> list:
        """The items on success, an empty list on failure."""
        return self.items if self.ok else []
