"""history module init"""
from sui_agent.history.aggregator import aggregate_transactions
from sui_agent.history.classifier import classify_asset, classify_transaction
from sui_agent.history.fetcher import LedgerFetcher, LedgerFetchError, window_bounds
from sui_agent.history.report import format_history_report, format_summary_report
from sui_agent.history.window import resolve_time_window

__all__ = [
    "LedgerFetchError",
    "LedgerFetcher",
    "aggregate_transactions",
    "classify_asset",
    "classify_transaction",
    "format_history_report",
    "format_summary_report",
    "resolve_time_window",
    "window_bounds",
]
