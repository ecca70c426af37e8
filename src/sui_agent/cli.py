"""
Command-line access to the Sui wallet tools (no LLM required).

Usage:
    sui-agent --address 0x7d20... history last week
    sui-agent --address 0x7d20... summary 30 days
    sui-agent balance 0x7d20...
    sui-agent network
    sui-agent tools
    sui-agent --address 0x7d20... run get_sui_summary '{"time_filter": "today"}'
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys

from sui_agent.config import ConfigError, SuiConfig
from sui_agent.core.client import FULLNODE_URLS, SuiClient
from sui_agent.core.wallet import Wallet, WalletError
from sui_agent.tools.toolkit import SuiToolkit

# Commands that act on the configured wallet rather than an explicit address
_WALLET_COMMANDS = {"history", "summary", "run"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sui-agent", description="Sui wallet tools for AI agents")
    parser.add_argument("--network", choices=sorted(FULLNODE_URLS), help="Sui network (default: $SUI_NETWORK or testnet)")
    parser.add_argument("--rpc-url", help="Fullnode JSON-RPC URL (default: public node for the network)")
    parser.add_argument("--address", help="Wallet address (default: $SUI_WALLET_ADDRESS)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log RPC activity")

    sub = parser.add_subparsers(dest="command", required=True)

    balance = sub.add_parser("balance", help="SUI balance of an address")
    balance.add_argument("target", nargs="?", help="Address to query (default: wallet)")

    objects = sub.add_parser("objects", help="Objects owned by an address")
    objects.add_argument("target", nargs="?", help="Address to query (default: wallet)")
    objects.add_argument("--limit", type=int, default=10)

    sub.add_parser("network", help="Network and checkpoint info")

    history = sub.add_parser("history", help="Wallet transaction history")
    history.add_argument("time_filter", nargs="*", help='e.g. "last week", "today", "45 days"')

    summary = sub.add_parser("summary", help="SUI / USDC sent and received")
    summary.add_argument("time_filter", nargs="*", help='e.g. "last month", "yesterday"')

    sub.add_parser("tools", help="List the tools exposed to LLMs")

    run = sub.add_parser("run", help="Execute a tool by name")
    run.add_argument("tool_name")
    run.add_argument("tool_args", nargs="?", default="{}", help="JSON object of tool arguments")

    return parser


def load_config(args: argparse.Namespace) -> SuiConfig:
    """Environment first, then command-line overrides."""
    network = args.network or os.getenv("SUI_NETWORK", "testnet")
    config = SuiConfig(
        network=network,
        rpc_url=args.rpc_url or os.getenv("SUI_RPC_URL") or None,
        wallet_address=args.address or os.getenv("SUI_WALLET_ADDRESS") or None,
    )
    needs_wallet = args.command in _WALLET_COMMANDS
    if args.command in ("balance", "objects") and not args.target:
        needs_wallet = True
    config.validate(require_wallet=needs_wallet)
    return config


async def run_command(args: argparse.Namespace, toolkit: SuiToolkit) -> str:
    if args.command == "balance":
        return json.dumps(await toolkit.get_wallet_balance(args.target), indent=2)
    if args.command == "objects":
        return json.dumps(await toolkit.get_owned_objects(args.target, limit=args.limit), indent=2)
    if args.command == "network":
        return json.dumps(await toolkit.get_network_info(), indent=2)
    if args.command == "history":
        return await toolkit.get_transaction_history(" ".join(args.time_filter) or None)
    if args.command == "summary":
        return await toolkit.get_sui_summary(" ".join(args.time_filter) or None)
    if args.command == "tools":
        lines = []
        for tool in toolkit.to_openai_tools():
            name = tool["function"]["name"]
            desc = tool["function"]["description"][:60]
            lines.append(f"  {name:<25} {desc}")
        return "Available tools:\n" + "\n".join(lines)
    if args.command == "run":
        try:
            tool_args = json.loads(args.tool_args)
        except json.JSONDecodeError as e:
            return json.dumps({"error": f"Invalid JSON arguments: {e}"})
        return await toolkit.execute_tool(args.tool_name, tool_args)
    raise ValueError(f"Unknown command: {args.command}")


async def _main(args: argparse.Namespace, config: SuiConfig) -> str:
    wallet = Wallet.read_only(config.wallet_address) if config.wallet_address else None
    async with SuiClient(config.rpc_url, timeout=config.timeout) as client:
        toolkit = SuiToolkit(client, wallet, config)
        return await run_command(args, toolkit)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Fix Windows encoding for Unicode object names
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="replace")

    try:
        config = load_config(args)
        output = asyncio.run(_main(args, config))
    except (ConfigError, WalletError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        logging.getLogger("sui_agent.cli").error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
