"""
Runtime configuration for the Sui agent toolkit.

Values are passed explicitly into SuiClient / Wallet / SuiToolkit.
SuiConfig.from_env() is a convenience for scripts, the CLI and the API
server; nothing in the library reads the environment on its own.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from sui_agent.core.address import is_valid_address
from sui_agent.core.client import FULLNODE_URLS


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


@dataclass
class SuiConfig:
    """
    Connection and display settings.

    Args:
        network:         "mainnet", "testnet", "devnet" or "localnet"
        rpc_url:         Fullnode JSON-RPC URL (defaults to the public node for `network`)
        wallet_address:  Address of the active wallet
        timeout:         HTTP timeout in seconds for each RPC call
        page_size:       Transactions requested per directional history query
        display_limit:   Transactions listed in a history report
    """
    network: str = "testnet"
    rpc_url: str | None = None
    wallet_address: str | None = None
    timeout: float = 15.0
    page_size: int = 50
    display_limit: int = 10

    def __post_init__(self) -> None:
        if not self.rpc_url and self.network in FULLNODE_URLS:
            self.rpc_url = FULLNODE_URLS[self.network]

    @classmethod
    def from_env(cls) -> SuiConfig:
        """Build a config from SUI_* environment variables and validate it."""
        timeout_raw = os.getenv("SUI_RPC_TIMEOUT", "15")
        try:
            timeout = float(timeout_raw)
        except ValueError:
            raise ConfigError(f"SUI_RPC_TIMEOUT must be a number, got {timeout_raw!r}") from None

        config = cls(
            network=os.getenv("SUI_NETWORK", "testnet"),
            rpc_url=os.getenv("SUI_RPC_URL") or None,
            wallet_address=os.getenv("SUI_WALLET_ADDRESS") or None,
            timeout=timeout,
        )
        config.validate()
        return config

    def validate(self, require_wallet: bool = True) -> None:
        """Raise ConfigError if the configuration cannot be used."""
        if self.network not in FULLNODE_URLS and not self.rpc_url:
            raise ConfigError(
                f"Unknown network {self.network!r}; expected one of "
                f"{', '.join(FULLNODE_URLS)} or an explicit SUI_RPC_URL."
            )
        if self.timeout <= 0:
            raise ConfigError("timeout must be positive.")
        if self.page_size <= 0 or self.display_limit <= 0:
            raise ConfigError("page_size and display_limit must be positive.")
        if require_wallet:
            if not self.wallet_address:
                raise ConfigError("SUI_WALLET_ADDRESS is required.")
            if not is_valid_address(self.wallet_address):
                raise ConfigError(f"Invalid Sui wallet address: {self.wallet_address!r}")
