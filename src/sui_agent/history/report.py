"""
Text reports returned to the LLM (and printed by the CLI).

The agent framework treats these as opaque tool results, so they are
plain markdown-ish text rather than structured data.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sui_agent.core.models import LedgerSummary, TimeWindow, TransactionRecord
from sui_agent.history.classifier import classify_transaction
from sui_agent.history.window import ALL_TIME, FILTER_LEGEND

DEFAULT_DISPLAY_LIMIT = 10
DIGEST_PREFIX_CHARS = 12


def format_timestamp(timestamp_ms: int | None) -> str:
    """Local time for a millisecond timestamp, or 'Unknown'."""
    if not timestamp_ms:
        return "Unknown"
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d %H:%M:%S")


def format_signed(value: Decimal, decimals: int) -> str:
    """Leading '+' for non-negative values: '+1.50', '-2.000000000'."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.{decimals}f}"


def _in_window(window: TimeWindow) -> str:
    return f" in {window.label}" if window.label != ALL_TIME else ""


def _window_line(window: TimeWindow, title: str) -> str:
    if window.label == ALL_TIME:
        return ""
    line = f"**{title}:** {window.label}"
    if window.start is not None:
        line += f" (from {window.start.strftime('%Y-%m-%d')})"
    return line


def format_history_report(
    wallet_address: str,
    window: TimeWindow,
    records: list[TransactionRecord],
    display_limit: int = DEFAULT_DISPLAY_LIMIT,
) -> str:
    """Numbered transaction list with a filter legend and a count footer."""
    if not records:
        return f"No transaction history found for wallet address: {wallet_address}"

    shown = records[:display_limit]
    entries = []
    for index, record in enumerate(shown, start=1):
        tx = classify_transaction(record, wallet_address)
        entry = [
            f"{index}. **{tx.primary_summary}**",
            f"   - Time: {format_timestamp(tx.timestamp_ms)}",
            f"   - Status: {tx.status or 'Unknown'}",
            f"   - Tx ID: {tx.digest[:DIGEST_PREFIX_CHARS]}...",
        ]
        if tx.secondary_details:
            entry.append(f"   - Additional: {', '.join(tx.secondary_details)}")
        entries.append("\n".join(entry))

    title = "Transaction History"
    if window.label != ALL_TIME:
        title += f" - {window.label}"

    sections = [f"**{title}**"]
    window_line = _window_line(window, "Time Filter")
    if window_line:
        sections.append(window_line)
    sections.append("\n\n".join(entries))
    sections.append(
        "**Available Time Filters:**\n"
        + "\n".join(f"- {phrase} - {meaning}" for phrase, meaning in FILTER_LEGEND)
    )
    sections.append(
        f"Showing {len(shown)} of {len(records)} total transactions{_in_window(window)}."
    )
    return "\n\n".join(sections)


def format_summary_report(
    wallet_address: str,
    window: TimeWindow,
    summary: LedgerSummary,
) -> str:
    """SUI / USDC sent, received and net flow for a time period."""
    if summary.transaction_count == 0:
        return f"No transactions found for wallet address: {wallet_address}{_in_window(window)}"

    sui = summary.native
    usdc = summary.stablecoin

    title = "SUI & USDC Summary"
    if window.label != ALL_TIME:
        title += f" - {window.label}"

    sections = [f"**{title}**"]
    window_line = _window_line(window, "Time Period")
    if window_line:
        sections.append(window_line)
    sections.append(f"**Transaction Count:** {summary.transaction_count} transactions")
    sections.append(
        "**SUI Tokens:**\n"
        f"- Total Sent: {sui.total_sent:.9f} SUI\n"
        f"- Total Received: {sui.total_received:.9f} SUI\n"
        f"- Net Flow: {format_signed(sui.net_flow, 9)} SUI ({sui.flow_label})"
    )
    sections.append(
        "**USDC Tokens:**\n"
        f"- Total Sent: {usdc.total_sent:.2f} USDC\n"
        f"- Total Received: {usdc.total_received:.2f} USDC\n"
        f"- Net Flow: {format_signed(usdc.net_flow, 2)} USDC ({usdc.flow_label})"
    )
    sections.append(
        "**Net Flow Explanation:**\n"
        "- Positive net flow = More received than sent (net gain)\n"
        "- Negative net flow = More sent than received (net loss)\n"
        "- Zero net flow = Equal amounts sent and received"
    )
    return "\n\n".join(sections)
