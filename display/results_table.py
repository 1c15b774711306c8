"""
Results Table
=============
Renders the scan results as a terminal table (via 'rich').

One row per (token, pair). A token with three promising pairs gets three
rows, in the order DexScreener returned the pairs.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from discovery.models import AnalysisResult

TABLE_TITLE = "Promising Solana Tokens (from token-profiles + search)"
EMPTY_MESSAGE = "No promising Solana tokens found with the current thresholds."

# (header, justify, style)
COLUMNS = [
    ("Symbol", "left", "blue"),
    ("Price (USD)", "right", "green"),
    ("24h Volume (USD)", "right", "yellow"),
    ("24h Price Change (%)", "right", "magenta"),
    ("Liquidity (USD)", "right", "cyan"),
    ("DexScreener URL", "left", None),
]


def format_grouped(value: float) -> str:
    """
    Thousands separators, up to three decimals, no trailing zeros.
    60000 -> "60,000", 1234.5678 -> "1,234.568"
    """
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def build_rows(results: list[AnalysisResult]) -> list[tuple[str, str, str, str, str, str]]:
    """Flatten results into display rows (all cells already formatted)."""
    rows = []
    for result in results:
        for pair in result.pairs:
            rows.append((
                pair.symbol or "N/A",
                f"${pair.price_usd:.4f}",
                f"${format_grouped(pair.volume_h24)}",
                f"{pair.price_change_h24:.2f}%",
                f"${format_grouped(pair.liquidity_usd)}",
                result.profile.url or "",
            ))
    return rows


def display_results(results: list[AnalysisResult], console: Console | None = None) -> None:
    """Print the results table, or a short message when there is nothing to show."""
    console = console or Console()

    if not results:
        console.print(EMPTY_MESSAGE)
        return

    table = Table(title=TABLE_TITLE, show_header=True, header_style="bold")
    for header, justify, style in COLUMNS:
        # long cells fold onto extra lines instead of being cut
        table.add_column(header, justify=justify, style=style, overflow="fold")

    for row in build_rows(results):
        # API strings are plain text, not console markup
        table.add_row(*(Text(cell) for cell in row))

    console.print(table)
