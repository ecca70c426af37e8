"""
Core data models for the Sui blockchain.
All amounts are in MIST (1 SUI = 1,000,000,000 MIST) internally.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

MIST_PER_SUI = 1_000_000_000
USDC_UNIT = 1_000_000

SUI_COIN_TYPE = "0x2::sui::SUI"


class AssetClass(str, Enum):
    """How a coin type is treated for display and aggregation."""
    NATIVE = "native"
    STABLECOIN = "stablecoin"
    OTHER = "other"


class BalanceChange(BaseModel):
    """A signed movement of one coin type into or out of an owner."""
    owner_address: str | None = None
    coin_type: str
    amount: int  # smallest unit, negative = debit


class ObjectChange(BaseModel):
    """An object created, transferred, mutated or deleted by a transaction."""
    change_kind: str
    object_type: str | None = None


class TransactionEvent(BaseModel):
    event_type: str


class CallOperation(BaseModel):
    """One command of a programmable transaction block."""
    kind: str
    target: str | None = None
    recipient: str | None = None


class TransactionRecord(BaseModel):
    """A finalized transaction as reported by the fullnode query API."""
    digest: str
    timestamp_ms: int | None = None
    status: str | None = None
    sender: str | None = None
    balance_changes: list[BalanceChange] = Field(default_factory=list)
    object_changes: list[ObjectChange] = Field(default_factory=list)
    events: list[TransactionEvent] = Field(default_factory=list)
    call_operations: list[CallOperation] = Field(default_factory=list)

    @property
    def sort_timestamp(self) -> int:
        """Timestamp used for ordering and window checks (missing -> 0)."""
        return self.timestamp_ms or 0

    @property
    def timestamp(self) -> datetime | None:
        if not self.timestamp_ms:
            return None
        return datetime.fromtimestamp(self.timestamp_ms / 1000).astimezone()


class TimeWindow(BaseModel):
    """
    A resolved time filter.

    start=None means unbounded. end is "now" unless the window covers a
    single closed day, in which case fixed_end is True.
    """
    label: str
    start: datetime | None = None
    end: datetime
    fixed_end: bool = False

    @property
    def is_bounded(self) -> bool:
        return self.start is not None


class AssetTotals(BaseModel):
    """Sent / received totals for one asset class, in display units."""
    total_sent: Decimal = Decimal(0)
    total_received: Decimal = Decimal(0)

    @property
    def net_flow(self) -> Decimal:
        return self.total_received - self.total_sent

    @property
    def flow_label(self) -> str:
        net = self.net_flow
        if net > 0:
            return "gain"
        if net < 0:
            return "loss"
        return "even"


class LedgerSummary(BaseModel):
    transaction_count: int = 0
    native: AssetTotals = Field(default_factory=AssetTotals)
    stablecoin: AssetTotals = Field(default_factory=AssetTotals)


class ClassifiedTransaction(BaseModel):
    """Human-readable description of one transaction, derived per request."""
    primary_summary: str
    secondary_details: list[str] = Field(default_factory=list)
    timestamp_ms: int | None = None
    status: str | None = None
    digest: str


class Balance(BaseModel):
    """Coin balance of an address."""
    address: str
    coin_type: str = SUI_COIN_TYPE
    total_balance_mist: int
    coin_object_count: int = 0

    @property
    def sui(self) -> float:
        """SUI value (human-readable)."""
        return self.total_balance_mist / MIST_PER_SUI

    def to_agent_summary(self) -> str:
        """Human-readable summary for the LLM."""
        return f"SUI: {self.sui:.4f} ({self.total_balance_mist} MIST)"


class OwnedObject(BaseModel):
    """An object owned by an address."""
    object_id: str
    object_type: str | None = None
    name: str | None = None
