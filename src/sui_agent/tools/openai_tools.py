"""OpenAI function-calling tool definitions for SuiToolkit."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sui_agent.tools.toolkit import SuiToolkit

TIME_FILTER_DESCRIPTION = (
    "Optional time filter, e.g. 'today', 'yesterday', 'last week', 'last month', "
    "'90 days', 'last year' or 'last 45 days'. Omit for all history."
)

ADDRESS_DESCRIPTION = (
    "Sui address (0x...). Use 'my' or omit it for the connected wallet."
)


def build_openai_tools(toolkit: SuiToolkit) -> list[dict[str, Any]]:
    """Return a list of OpenAI function-calling tool definitions."""
    return [
        {
            "type": "function",
            "function": {
                "name": "get_wallet_balance",
                "description": (
                    "Get the SUI balance of an address. "
                    "Returns the balance in SUI and in MIST (1 SUI = 1,000,000,000 MIST)."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "address": {"type": "string", "description": ADDRESS_DESCRIPTION},
                    },
                    "required": [],
                },
            },
        },
        {
            "type": "function",
            "function": {
                "name": "get_owned_objects",
                "description": "List objects and NFTs owned by an address.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "address": {"type": "string", "description": ADDRESS_DESCRIPTION},
                        "limit": {
                            "type": "integer",
                            "description": "Maximum number of objects to list (default 10)",
                        },
                    },
                    "required": [],
                },
            },
        },
        {
            "type": "function",
            "function": {
                "name": "get_network_info",
                "description": "Get the current Sui network, chain ID and latest checkpoint.",
                "parameters": {"type": "object", "properties": {}, "required": []},
            },
        },
        {
            "type": "function",
            "function": {
                "name": "get_transaction_history",
                "description": (
                    "Get the actual transaction history (list of transactions) of the user's "
                    "wallet, not just current balances. Each entry says what was sent, "
                    "received, created or called."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "time_filter": {"type": "string", "description": TIME_FILTER_DESCRIPTION},
                    },
                    "required": [],
                },
            },
        },
        {
            "type": "function",
            "function": {
                "name": "get_sui_summary",
                "description": (
                    "Calculate total SUI and USDC sent and received by the user's wallet "
                    "in a time period, with the net flow."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "time_filter": {"type": "string", "description": TIME_FILTER_DESCRIPTION},
                    },
                    "required": [],
                },
            },
        },
    ]
