#!/usr/bin/env python3
"""
Example 02: Transaction history and SUI / USDC summary.

Prints the same text reports the agent tools return.

Usage:
    export SUI_WALLET_ADDRESS=0x7d20...
    python examples/02_transaction_history.py
    python examples/02_transaction_history.py last week
    python examples/02_transaction_history.py 45 days
"""

import asyncio
import sys

from sui_agent import SuiClient, SuiConfig, Wallet
from sui_agent.tools import SuiToolkit


async def main(time_filter: str | None) -> None:
    config = SuiConfig.from_env()
    async with SuiClient(config.rpc_url, timeout=config.timeout) as client:
        toolkit = SuiToolkit(client, Wallet.read_only(config.wallet_address), config)

        print(await toolkit.get_transaction_history(time_filter))
        print()
        print("-" * 50)
        print()
        print(await toolkit.get_sui_summary(time_filter))


if __name__ == "__main__":
    asyncio.run(main(" ".join(sys.argv[1:]) or None))
