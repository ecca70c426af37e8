"""LangChain tool wrappers for SuiToolkit."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sui_agent.tools.toolkit import SuiToolkit


def build_langchain_tools(toolkit: SuiToolkit) -> list[Any]:
    """
    Return a list of LangChain BaseTool instances (async).
    Requires: pip install sui-agent-sdk[langchain]
    """
    try:
        from langchain_core.tools import tool as lc_tool
    except ImportError:
        raise ImportError(
            "LangChain integration requires: pip install sui-agent-sdk[langchain]"
        ) from None

    @lc_tool
    async def get_wallet_balance(address: str = "my") -> str:
        """
        Get the SUI balance of a Sui address.
        address: 0x... address, or 'my' for the connected wallet
        """
        return json.dumps(await toolkit.get_wallet_balance(address=address))

    @lc_tool
    async def get_owned_objects(address: str = "my", limit: int = 10) -> str:
        """
        List objects and NFTs owned by a Sui address.
        address: 0x... address, or 'my' for the connected wallet
        limit: maximum number of objects to list
        """
        return json.dumps(await toolkit.get_owned_objects(address=address, limit=limit))

    @lc_tool
    async def get_network_info() -> str:
        """Get the current Sui network, chain ID and latest checkpoint."""
        return json.dumps(await toolkit.get_network_info())

    @lc_tool
    async def get_transaction_history(time_filter: str = "") -> str:
        """
        Get the transaction history of the user's wallet, not just balances.
        time_filter: e.g. 'today', 'yesterday', 'last week', '30 days'; empty for all
        """
        return await toolkit.get_transaction_history(time_filter or None)

    @lc_tool
    async def get_sui_summary(time_filter: str = "") -> str:
        """
        Calculate total SUI and USDC sent and received in a time period.
        time_filter: e.g. 'today', 'yesterday', 'last week', '30 days'; empty for all
        """
        return await toolkit.get_sui_summary(time_filter or None)

    return [
        get_wallet_balance,
        get_owned_objects,
        get_network_info,
        get_transaction_history,
        get_sui_summary,
    ]
