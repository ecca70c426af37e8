"""
sui-agent: Python SDK for AI agents reading a Sui wallet.

Usage:
    from sui_agent import SuiClient, Wallet
    from sui_agent.tools import SuiToolkit
"""

from sui_agent.config import ConfigError, SuiConfig
from sui_agent.core.client import SuiClient
from sui_agent.core.models import Balance, TransactionRecord
from sui_agent.core.wallet import Wallet

__version__ = "0.1.0"
__all__ = [
    "SuiClient",
    "Wallet",
    "SuiConfig",
    "ConfigError",
    "Balance",
    "TransactionRecord",
]
