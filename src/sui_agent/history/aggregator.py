"""Sum SUI and USDC movements over a set of transactions."""

from __future__ import annotations

from collections.abc import Iterable

from sui_agent.core.models import AssetClass, AssetTotals, LedgerSummary, TransactionRecord
from sui_agent.history.classifier import classify_asset, convert_amount


def aggregate_transactions(records: Iterable[TransactionRecord]) -> LedgerSummary:
    """
    Total sent / received per tracked asset class.

    Every record counts once towards transaction_count, with or without
    balance changes. Movements of other tokens are not totalled.
    """
    totals = {
        AssetClass.NATIVE: AssetTotals(),
        AssetClass.STABLECOIN: AssetTotals(),
    }
    count = 0

    for record in records:
        count += 1
        for change in record.balance_changes:
            asset_class = classify_asset(change.coin_type)
            bucket = totals.get(asset_class)
            if bucket is None or change.amount == 0:
                continue
            amount = convert_amount(change.amount, asset_class)
            if change.amount < 0:
                bucket.total_sent += amount
            else:
                bucket.total_received += amount

    return LedgerSummary(
        transaction_count=count,
        native=totals[AssetClass.NATIVE],
        stablecoin=totals[AssetClass.STABLECOIN],
    )
