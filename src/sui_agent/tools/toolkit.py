"""
SuiToolkit: the main entry point for AI agents.

This class wraps the Sui read capabilities into a unified interface that:
1. Exposes clean async Python methods for all agent actions
2. Returns text reports the LLM can relay directly
3. Generates tool schemas for OpenAI, Anthropic, and LangChain

Usage:
    from sui_agent import SuiClient, Wallet
    from sui_agent.tools import SuiToolkit

    client = SuiClient()
    wallet = Wallet.read_only("0x7d20...")
    toolkit = SuiToolkit(client, wallet)

    balance = await toolkit.get_wallet_balance()
    report = await toolkit.get_transaction_history("last week")

    # For LLM integration:
    tools = toolkit.to_openai_tools()    # list of OpenAI tool dicts
    tools = toolkit.to_anthropic_tools() # list of Anthropic tool dicts
    tools = toolkit.to_langchain_tools() # list of LangChain BaseTool
"""

from __future__ import annotations

import json
import logging
from typing import Any

from sui_agent.config import SuiConfig
from sui_agent.core.client import SuiClient
from sui_agent.core.wallet import Wallet, WalletError
from sui_agent.history.aggregator import aggregate_transactions
from sui_agent.history.fetcher import LedgerFetcher, window_bounds
from sui_agent.history.report import format_history_report, format_summary_report
from sui_agent.history.window import resolve_time_window

logger = logging.getLogger("sui_agent.toolkit")

# Inputs the LLM uses to mean "the connected wallet"
_SELF_ALIASES = {"", "my", "mine", "me", "self"}


class SuiToolkit:
    """
    Unified AI agent toolkit for a Sui wallet.

    All methods are safe to call directly from an LLM's tool-calling loop;
    the history and summary reports never raise.
    """

    def __init__(
        self,
        client: SuiClient,
        wallet: Wallet | None,
        config: SuiConfig | None = None,
    ) -> None:
        self._client = client
        self._wallet = wallet
        self._config = config or SuiConfig(wallet_address=wallet.address if wallet else None)
        self._fetcher = LedgerFetcher(client, page_size=self._config.page_size)

    @property
    def wallet_address(self) -> str:
        if self._wallet is None:
            raise WalletError("No wallet configured (read-only mode).")
        return self._wallet.address

    def _resolve_address(self, address: str | None) -> str:
        if address is None or address.strip().lower() in _SELF_ALIASES:
            return self.wallet_address
        return address.strip()

    # ------------------------------------------------------------------
    # Account & network
    # ------------------------------------------------------------------

    async def get_wallet_balance(self, address: str | None = None) -> dict[str, Any]:
        """
        Get the SUI balance of an address (the agent's wallet by default).

        Returns:
            dict with 'sui' (float), 'mist' (int) and 'summary' (str)
        """
        balance = await self._client.get_balance(self._resolve_address(address))
        return {
            "address": balance.address,
            "sui": round(balance.sui, 9),
            "mist": balance.total_balance_mist,
            "coin_objects": balance.coin_object_count,
            "summary": balance.to_agent_summary(),
        }

    async def get_owned_objects(self, address: str | None = None, limit: int = 10) -> dict[str, Any]:
        """
        List objects (coins, NFTs, capabilities) owned by an address.

        Returns:
            dict with 'page_count' (objects on the first page of at most
            'page_size') and the first `limit` of them
        """
        target = self._resolve_address(address)
        page_size = self._config.page_size
        objects = await self._client.get_owned_objects(target, limit=page_size)
        return {
            "address": target,
            "page_count": len(objects),
            "page_size": page_size,
            "objects": [
                {
                    "object_id": o.object_id,
                    "type": o.object_type or "Unknown",
                    "name": o.name,
                }
                for o in objects[:limit]
            ],
            "truncated": len(objects) > limit,
        }

    async def get_network_info(self) -> dict[str, Any]:
        """
        Get the connected network, chain identifier and latest checkpoint.
        """
        chain_id = await self._client.get_chain_identifier()
        checkpoint = await self._client.get_latest_checkpoint()
        return {
            "network": self._config.network,
            "rpc_url": self._client.rpc_url,
            "chain_id": chain_id,
            "latest_checkpoint": checkpoint,
            "wallet": self._wallet.address if self._wallet else None,
        }

    # ------------------------------------------------------------------
    # History & summary
    # ------------------------------------------------------------------

    async def get_transaction_history(self, time_filter: str | None = None) -> str:
        """
        List the wallet's transactions, newest first, for a time filter such
        as "today", "yesterday", "last week" or "45 days".

        Returns:
            str: formatted report, or an error message
        """
        try:
            window = resolve_time_window(time_filter)
            address = self.wallet_address
            logger.info(f"Getting transactions for wallet: {address[:10]}... ({window.label})")
            records = await self._fetcher.fetch(address, *window_bounds(window))
            return format_history_report(address, window, records, self._config.display_limit)
        except Exception as e:
            logger.error(f"Transaction history error: {e}")
            return f"Error fetching transaction history: {e}. Please try again."

    async def get_sui_summary(self, time_filter: str | None = None) -> str:
        """
        Total SUI and USDC sent and received by the wallet in a time period.

        Returns:
            str: formatted report, or an error message
        """
        try:
            window = resolve_time_window(time_filter)
            address = self.wallet_address
            logger.info(f"Calculating SUI summary for wallet: {address[:10]}... ({window.label})")
            records = await self._fetcher.fetch(address, *window_bounds(window))
            return format_summary_report(address, window, aggregate_transactions(records))
        except Exception as e:
            logger.error(f"SUI summary error: {e}")
            return f"Error calculating SUI summary: {e}. Please try again."

    # ------------------------------------------------------------------
    # Tool schema generators
    # ------------------------------------------------------------------

    def to_openai_tools(self) -> list[dict[str, Any]]:
        """Generate OpenAI function-calling tool definitions."""
        from sui_agent.tools.openai_tools import build_openai_tools
        return build_openai_tools(self)

    def to_anthropic_tools(self) -> list[dict[str, Any]]:
        """Generate Anthropic tool-use definitions."""
        from sui_agent.tools.anthropic_tools import build_anthropic_tools
        return build_anthropic_tools(self)

    def to_langchain_tools(self) -> list[Any]:
        """Generate LangChain BaseTool instances."""
        from sui_agent.tools.langchain_tools import build_langchain_tools
        return build_langchain_tools(self)

    def tool_names(self) -> list[str]:
        return list(self._tool_map())

    def _tool_map(self) -> dict[str, Any]:
        return {
            "get_wallet_balance": lambda i: self.get_wallet_balance(**i),
            "get_owned_objects": lambda i: self.get_owned_objects(**i),
            "get_network_info": lambda _: self.get_network_info(),
            "get_transaction_history": lambda i: self.get_transaction_history(**i),
            "get_sui_summary": lambda i: self.get_sui_summary(**i),
        }

    async def execute_tool(self, tool_name: str, tool_input: dict[str, Any] | None = None) -> str:
        """
        Execute a tool by name with given inputs.
        Used by LLM frameworks to dispatch tool calls.

        Returns:
            str: text report, or a JSON-encoded result
        """
        fn = self._tool_map().get(tool_name)
        if not fn:
            return json.dumps({"error": f"Unknown tool: {tool_name}"})

        try:
            result = await fn(tool_input or {})
        except Exception as e:
            logger.error(f"Tool {tool_name} failed: {e}")
            return json.dumps({"error": str(e)})

        if isinstance(result, str):
            return result
        return json.dumps(result, indent=2)
