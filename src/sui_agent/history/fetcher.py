"""
LedgerFetcher: collect every transaction touching a wallet.

The fullnode indexes transactions by sender and by recipient separately, so
history is the merge of two queries. Either query may fail on its own; the
other side's results are still used.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import TYPE_CHECKING

from sui_agent.core.client import TRANSACTION_DETAIL_OPTIONS
from sui_agent.core.models import TimeWindow, TransactionRecord

if TYPE_CHECKING:
    from sui_agent.core.client import SuiClient

logger = logging.getLogger("sui_agent.fetcher")

DEFAULT_PAGE_SIZE = 50


class LedgerFetchError(Exception):
    """Raised when neither the sent nor the received query succeeded."""
    pass


def to_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def window_bounds(window: TimeWindow) -> tuple[datetime | None, datetime | None]:
    """Return (lower, upper) fetch bounds; the upper bound is set only for closed days."""
    return window.start, window.end if window.fixed_end else None


def merge_records(*batches: list[TransactionRecord]) -> list[TransactionRecord]:
    """
    Concatenate batches, keep the first record per digest and order newest first.
    Records without a timestamp sort last.
    """
    seen: set[str] = set()
    unique: list[TransactionRecord] = []
    for batch in batches:
        for record in batch:
            if record.digest in seen:
                continue
            seen.add(record.digest)
            unique.append(record)
    return sorted(unique, key=lambda r: r.sort_timestamp, reverse=True)


def filter_records(
    records: list[TransactionRecord],
    lower_bound: datetime | None = None,
    upper_bound: datetime | None = None,
) -> list[TransactionRecord]:
    """Drop records older than lower_bound or newer than upper_bound."""
    if lower_bound is not None:
        lower_ms = to_millis(lower_bound)
        records = [r for r in records if r.sort_timestamp >= lower_ms]
    if upper_bound is not None:
        upper_ms = to_millis(upper_bound)
        records = [r for r in records if r.sort_timestamp <= upper_ms]
    return records


class LedgerFetcher:
    """
    Fetches, merges and time-filters a wallet's transactions.

    Usage:
        fetcher = LedgerFetcher(client)
        records = await fetcher.fetch(wallet.address, window.start)
    """

    def __init__(self, client: SuiClient, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._client = client
        self.page_size = page_size

    async def fetch(
        self,
        wallet_address: str,
        lower_bound: datetime | None = None,
        upper_bound: datetime | None = None,
    ) -> list[TransactionRecord]:
        """
        Return the wallet's transactions, newest first, within the bounds.

        Raises:
            LedgerFetchError: if both directional queries failed
        """
        sent, received = await asyncio.gather(
            self._client.query_by_sender(
                wallet_address, limit=self.page_size, options=TRANSACTION_DETAIL_OPTIONS, descending=True
            ),
            self._client.query_by_recipient(
                wallet_address, limit=self.page_size, options=TRANSACTION_DETAIL_OPTIONS, descending=True
            ),
            return_exceptions=True,
        )

        failures = []
        batches: list[list[TransactionRecord]] = []
        for direction, result in (("sent", sent), ("received", received)):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning(f"Error getting {direction} transactions: {result}")
                failures.append(f"{direction}: {result}")
                batches.append([])
            else:
                batches.append(result)

        if len(failures) == 2:
            raise LedgerFetchError("; ".join(failures))

        records = merge_records(*batches)
        filtered = filter_records(records, lower_bound, upper_bound)
        if lower_bound is not None or upper_bound is not None:
            logger.info(f"Filtered {len(records)} transactions to {len(filtered)} within window")
        return filtered
