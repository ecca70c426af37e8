#!/usr/bin/env python3
"""
Example 01: Check a wallet balance.

Connects to the public Sui testnet fullnode and reads the balance and
owned objects of any address. No wallet keys required.

Usage:
    python examples/01_check_balance.py
    python examples/01_check_balance.py 0x7d20dcdb2bca4f508ea9613994683eb4e76e9c4ed371169677c1be02aaf0b58e
"""

import asyncio
import sys

# Fix Windows encoding for Unicode object names
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(errors="replace")

from sui_agent import SuiClient, Wallet
from sui_agent.tools import SuiToolkit

DEFAULT_ADDRESS = "0x7d20dcdb2bca4f508ea9613994683eb4e76e9c4ed371169677c1be02aaf0b58e"


async def main(address: str) -> None:
    async with SuiClient() as client:
        toolkit = SuiToolkit(client, Wallet.read_only(address))

        # Toolkit output (what an LLM sees)
        print("=== Toolkit output ===")
        print(await toolkit.get_wallet_balance())

        # Or use the client directly for structured models
        print("\n=== Structured output ===")
        balance = await client.get_balance(address)
        print(f"Address: {address[:16]}...")
        print(f"SUI:     {balance.sui:.4f} ({balance.coin_object_count} coin objects)")

        objects = await client.get_owned_objects(address, limit=10)
        if objects:
            print("Objects:")
            for obj in objects:
                print(f"  {obj.object_id[:12]}...  {obj.name or obj.object_type}")
        else:
            print("Objects: (none)")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_ADDRESS))
