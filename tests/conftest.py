"""Pytest configuration and fixtures."""

import json

import pytest

from config.settings import Settings

PROFILE_URL = "https://dexscreener.com/solana/ABC"


class FakeResponse:
    """Stands in for aiohttp.ClientResponse inside `async with session.get(...)`."""

    def __init__(self, status=200, payload=None, reason="OK", body=None):
        self.status = status
        self.reason = reason
        self._payload = payload
        self._body = body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def json(self, content_type="application/json"):
        if self._body is not None:
            return json.loads(self._body)
        return self._payload


class FakeSession:
    """
    Minimal aiohttp.ClientSession replacement.

    *routes* maps a URL path (or path + "?q=<value>") to a FakeResponse
    or an exception instance to raise from get().
    """

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []

    def get(self, url, params=None):
        self.calls.append((url, params))
        path = url.split("://", 1)[-1].split("/", 1)[-1]
        key = "/" + path
        if params and "q" in params:
            key = f"{key}?q={params['q']}"
        outcome = self.routes.get(key)
        if outcome is None:
            return FakeResponse(status=404, reason="Not Found")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def make_profile(chain_id="solana", token_address="ABC", url=PROFILE_URL):
    return {"chainId": chain_id, "tokenAddress": token_address, "url": url}


def make_pair(
    chain_id="solana",
    symbol="FOO",
    price="1.23456",
    volume=60000,
    change=7.5,
    liquidity=12000,
    pair_address="PAIR1",
):
    return {
        "chainId": chain_id,
        "dexId": "raydium",
        "pairAddress": pair_address,
        "baseToken": {"symbol": symbol},
        "priceUsd": price,
        "volume": {"h24": volume},
        "priceChange": {"h24": change},
        "liquidity": {"usd": liquidity},
    }


@pytest.fixture
def test_settings():
    """Settings with known values, independent of the environment."""
    return Settings(
        dexscreener_base_url="https://api.dexscreener.com",
        request_timeout_seconds=None,
        scan_concurrency=1,
        log_level="INFO",
        log_dir=None,
    )
