"""
Solana Token Scout: Main Entry Point
====================================
Running this file:
1. Loads configuration from .env (optional)
2. Pulls the latest token profiles from DexScreener
3. Searches every Solana token's trading pairs
4. Prints the pairs with strong 24h activity as a table

Usage:
    python main.py
    solana-scout        # after `pip install -e .`

The table goes to stdout, logs go to stderr.
"""

import asyncio

from config.settings import settings
from discovery.dexscreener_client import TOKEN_PROFILES_ENDPOINT
from discovery.token_scanner import TokenScanner
from display.results_table import display_results
from utils.logger import setup_logging, get_logger

logger = get_logger(__name__)


async def main() -> None:
    """Main async entry point."""
    setup_logging(log_level=settings.log_level, log_dir=settings.log_dir)

    for problem in settings.validate():
        logger.warning("config_issue", issue=problem)

    logger.info("fetching_solana_tokens", endpoint=TOKEN_PROFILES_ENDPOINT)

    scanner = TokenScanner(settings)
    await scanner.initialize()
    try:
        results = await scanner.run_discovery()
    except Exception as e:
        logger.error("scout_error", error=str(e), type=type(e).__name__)
        raise
    finally:
        await scanner.close()

    logger.info("displaying_results", tokens=len(results))
    display_results(results)


def run() -> None:
    """Console-script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
