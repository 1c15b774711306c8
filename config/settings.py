"""
Configuration Manager
=====================
Single source of truth for the scout's settings.

How it works:
- On startup, it reads the .env file in the project root (if there is one)
- Each setting has a default, so the scout runs with no configuration at all
- Anything can be overridden with an environment variable

The screening thresholds and the target chain are NOT settings. They live
as constants in discovery/token_filter.py.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from dotenv import load_dotenv


load_dotenv(Path(__file__).parent.parent / ".env")


def _get_env(key: str, default: str = "") -> str:
    """Get an environment variable, returning default if not set."""
    return os.getenv(key, default)


def _get_env_int(key: str, default: int) -> int:
    """Get an environment variable as a whole number."""
    val = os.getenv(key)
    return int(val) if val else default


def _get_env_optional_float(key: str) -> float | None:
    """Get an environment variable as a float, or None when unset."""
    val = os.getenv(key)
    return float(val) if val else None


@dataclass
class Settings:
    """
    All scout configuration in one place.

    Sections:
    - DexScreener: where to send requests and how long to wait
    - Scanning: how many token lookups may run at once
    - System: logging
    """

    # =========================================================================
    # DexScreener
    # =========================================================================

    # Public API, no key needed
    dexscreener_base_url: str = field(default_factory=lambda: _get_env(
        "DEXSCREENER_BASE_URL", "https://api.dexscreener.com"
    ))

    # Total time budget per request. None = wait as long as it takes.
    request_timeout_seconds: float | None = field(
        default_factory=lambda: _get_env_optional_float("REQUEST_TIMEOUT_SECONDS")
    )

    # =========================================================================
    # Scanning
    # =========================================================================

    # How many pair searches may be in flight at once.
    # 1 = strictly one after another. Output order is the same either way.
    scan_concurrency: int = field(
        default_factory=lambda: _get_env_int("SCAN_CONCURRENCY", 1)
    )

    # =========================================================================
    # System
    # =========================================================================

    # Logging level: DEBUG, INFO, WARNING, ERROR
    log_level: str = field(default_factory=lambda: _get_env("LOG_LEVEL", "INFO"))

    # Optional directory for a log file (empty = stderr only)
    log_dir: str | None = field(default_factory=lambda: _get_env("LOG_DIR") or None)

    @property
    def effective_request_timeout(self) -> float | None:
        """The timeout to hand to aiohttp. A non-positive value means no timeout."""
        if self.request_timeout_seconds is not None and self.request_timeout_seconds <= 0:
            return None
        return self.request_timeout_seconds

    def validate(self) -> list[str]:
        """
        Check that the settings make sense.
        Returns a list of problems found (empty list = all good).
        """
        problems = []

        if not self.dexscreener_base_url.startswith(("http://", "https://")):
            problems.append("DEXSCREENER_BASE_URL must start with http:// or https://")
        if self.request_timeout_seconds is not None and self.request_timeout_seconds <= 0:
            problems.append("REQUEST_TIMEOUT_SECONDS must be greater than 0 (ignored, running without a timeout)")
        if self.scan_concurrency < 1:
            problems.append("SCAN_CONCURRENCY must be at least 1")

        return problems


# Usage: from config.settings import settings
settings = Settings()
