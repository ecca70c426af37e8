"""core module init"""
from sui_agent.core.address import (
    AddressError,
    is_valid_address,
    normalize_address,
    shorten_address,
    validate_address,
)
from sui_agent.core.client import FULLNODE_URLS, SuiClient, SuiClientError
from sui_agent.core.models import (
    Balance,
    BalanceChange,
    ClassifiedTransaction,
    LedgerSummary,
    OwnedObject,
    TimeWindow,
    TransactionRecord,
)
from sui_agent.core.wallet import Wallet, WalletError

__all__ = [
    "AddressError",
    "Balance",
    "BalanceChange",
    "ClassifiedTransaction",
    "FULLNODE_URLS",
    "LedgerSummary",
    "OwnedObject",
    "SuiClient",
    "SuiClientError",
    "TimeWindow",
    "TransactionRecord",
    "Wallet",
    "WalletError",
    "is_valid_address",
    "normalize_address",
    "shorten_address",
    "validate_address",
]
